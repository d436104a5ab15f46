"""Exception hierarchy for smufljson."""


class SmuflJsonError(Exception):
    """Base exception for all smufljson errors."""

    pass


class DocumentError(SmuflJsonError):
    """Errors related to loading, validating or writing documents."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading or parsing a source document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class DocumentWriteError(DocumentError):
    """Error writing the output document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write document '{path}': {reason}")


class InvalidFontDocumentError(DocumentError):
    """The SVG document does not have the shape of an SVG music font."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"This XML is not a valid music font: {details}")


class GlyphError(SmuflJsonError):
    """Errors related to glyph identity."""

    pass


class UnknownWhitelistedGlyphError(GlyphError):
    """A main glyph named in the white list is missing from glyphnames."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(
            f"The glyph '{glyph_name}' from the white list is not defined in glyphnames"
        )


class MalformedCodepointError(GlyphError):
    """A codepoint string or unicode attribute cannot be normalized."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Malformed codepoint: {value!r}")


class PathError(SmuflJsonError):
    """Errors in path data transcoding."""

    pass


class PathCommandError(PathError):
    """Path data could not be interpreted past a given token.

    Attributes:
        command: The offending token (command letter, operand or "" at end of data)
        position: Index of the offending token in the token stream
        partial: Path data rendered before the error
    """

    def __init__(self, command: str, position: int, partial: str, reason: str) -> None:
        self.command = command
        self.position = position
        self.partial = partial
        self.reason = reason
        super().__init__(f"Unknown path data {command!r} at token {position}: {reason}")
