"""SVG path data transcoding.

Font outlines are drawn in font units with y increasing upward, while SVG
path data has y increasing downward. The transcoder walks a tokenized path,
maps every coordinate through a scale + vertical flip + translation, and
writes compact path data a renderer can use directly.

Only the commands found in SVG music fonts are supported: ``M``, ``L``,
``S``, ``C``, ``Z``, ``H``, ``V`` and their lowercase relative forms.
Every command letter must be written out: implicit repetition such as
``L10 10 20 20`` is rejected with "expected a command", and a glyph whose
path is rejected is dropped from the dictionary with that reason.
"""

import re
from collections.abc import Sequence

from fontTools.misc.transform import Transform

from smufljson.config import PathConfig
from smufljson.exceptions import PathCommandError

PathToken = str | float

# Number of (x, y) points taken by each point command
POINT_ARITY: dict[str, int] = {
    "M": 1,
    "L": 1,
    "S": 2,
    "C": 3,
    "Z": 0,
}

# Commands taking a single x (H) or y (V) scalar
SCALAR_COMMANDS = frozenset({"H", "V"})

_TOKEN_RE = re.compile(
    r"[A-Za-z]|[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
)


def tokenize_path(d: str) -> list[PathToken]:
    """Split path data into command letters and numeric operands.

    Args:
        d: Raw path data (e.g. ``"M10 20L-5.5,3e2Z"``)

    Returns:
        Command letters as ``str`` and operands as ``float``, in order
    """
    tokens: list[PathToken] = []
    for match in _TOKEN_RE.finditer(d):
        text = match.group()
        if text.isalpha():
            tokens.append(text)
        else:
            tokens.append(float(text))
    return tokens


def format_number(value: float, precision: int = 3) -> str:
    """Format an operand as a plain decimal.

    At most ``precision`` fractional digits are written, trailing zeros are
    stripped and negative zero is written as ``0``. Never uses exponent
    notation.
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _is_operand(token: object) -> bool:
    return isinstance(token, int | float) and not isinstance(token, bool)


def _take_operands(
    tokens: Sequence[PathToken],
    start: int,
    count: int,
    command: str,
    rendered: list[str],
) -> list[float]:
    operands = list(tokens[start:start + count])
    if len(operands) < count or not all(_is_operand(op) for op in operands):
        raise PathCommandError(
            command,
            start - 1,
            "".join(rendered),
            f"expected {count} numeric operands",
        )
    return [float(op) for op in operands]


def render_path(
    tokens: Sequence[PathToken],
    origin_x: float = 0.0,
    origin_y: float = 0.0,
    scale: float = 1.0,
    precision: int = 3,
) -> str:
    """Transcode a path token stream.

    Absolute points map to ``(origin_x + x * scale, origin_y - y * scale)``,
    relative points to ``(x * scale, -y * scale)``. ``H``/``h`` only touch the
    x scalar and ``V``/``v`` only the y scalar.

    Args:
        tokens: Output of :func:`tokenize_path`
        origin_x: Horizontal translation of absolute coordinates
        origin_y: Vertical translation of absolute coordinates
        scale: Uniform scale
        precision: Maximum fractional digits per operand

    Returns:
        Path data such as ``"M10,-20L30,-40"``

    Raises:
        PathCommandError: On an unknown command, a number where a command is
            expected, or missing operands. ``partial`` holds the path data
            rendered before the error.
    """
    absolute = Transform().translate(origin_x, origin_y).scale(scale, -scale)
    relative = Transform().scale(scale, -scale)

    rendered: list[str] = []
    index = 0
    while index < len(tokens):
        command = tokens[index]
        if not isinstance(command, str):
            raise PathCommandError(
                format_number(command, precision), index, "".join(rendered), "expected a command"
            )

        upper = command.upper()
        transform = absolute if command == upper else relative

        if upper in SCALAR_COMMANDS:
            (value,) = _take_operands(tokens, index + 1, 1, command, rendered)
            if upper == "H":
                values = [transform.xx * value + transform.dx]
            else:
                values = [transform.yy * value + transform.dy]
            consumed = 1
        elif upper in POINT_ARITY:
            consumed = 2 * POINT_ARITY[upper]
            operands = _take_operands(tokens, index + 1, consumed, command, rendered)
            values = []
            for point in zip(operands[0::2], operands[1::2]):
                values.extend(transform.transformPoint(point))
        else:
            raise PathCommandError(command, index, "".join(rendered), "unknown command")

        rendered.append(command + ",".join(format_number(v, precision) for v in values))
        index += 1 + consumed

    return "".join(rendered)


class PathTranscoder:
    """Transcodes raw path data with fixed transform parameters.

    Keeps the last input and its output so rendering the same path twice in
    a row does not recompute it. A different input replaces the memo. The
    memo is not shared: give each concurrent caller its own instance.

    Example:
        transcoder = PathTranscoder(scale=0.04)
        transcoder.render("M0 0L250 250Z")  # "M0,0L10,-10Z"
    """

    def __init__(
        self,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
        scale: float = 1.0,
        precision: int = 3,
    ) -> None:
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.scale = scale
        self.precision = precision

        self._last_input: str | None = None
        self._last_output: str | None = None

    @classmethod
    def from_config(cls, config: PathConfig) -> "PathTranscoder":
        """Create a transcoder from path settings."""
        return cls(
            origin_x=config.origin_x,
            origin_y=config.origin_y,
            scale=config.scale,
            precision=config.precision,
        )

    @property
    def is_cached(self) -> bool:
        """Whether a rendered output is memoized."""
        return self._last_output is not None

    def reset(self) -> None:
        """Forget the memoized output."""
        self._last_input = None
        self._last_output = None

    def render(self, d: str) -> str:
        """Transcode raw path data.

        Raises:
            PathCommandError: If the path data cannot be interpreted
        """
        if d != self._last_input:
            self.reset()
        if self._last_output is not None:
            return self._last_output

        output = render_path(
            tokenize_path(d),
            origin_x=self.origin_x,
            origin_y=self.origin_y,
            scale=self.scale,
            precision=self.precision,
        )
        self._last_input = d
        self._last_output = output
        return output
