"""White list filtering and alternate-glyph flattening.

The main glyph table comes from ``glyphnames.json`` and a main glyph white
list is curated against it, so an unknown main name is a hard error.
Alternate sets vary across font metadata revisions, so an unknown alternate
name is only a warning.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from smufljson.domain import AlternateGlyph, GlyphRecord, WhiteList
from smufljson.exceptions import UnknownWhitelistedGlyphError
from smufljson.utils import AssemblyLogger

T = TypeVar("T")


def filter_main(
    glyph_table: Mapping[str, T],
    whitelist: WhiteList,
) -> Mapping[str, T]:
    """Reduce the main glyph table to the white-listed names.

    Args:
        glyph_table: Glyph entries keyed by glyph name
        whitelist: White list; no filtering when ``main_glyphs`` is None

    Returns:
        ``glyph_table`` itself when there is no main white list, otherwise a
        new mapping holding the white-listed entries in white list order

    Raises:
        UnknownWhitelistedGlyphError: On the first white-listed name missing
            from ``glyph_table``
    """
    if whitelist.main_glyphs is None:
        return glyph_table

    filtered: dict[str, T] = {}
    for glyph_name in whitelist.main_glyphs:
        if glyph_name not in glyph_table:
            raise UnknownWhitelistedGlyphError(glyph_name)
        filtered[glyph_name] = glyph_table[glyph_name]
    return filtered


def filter_alternates(
    alternates_table: Mapping[str, T],
    whitelist: WhiteList,
    log: AssemblyLogger | None = None,
) -> Mapping[str, T]:
    """Reduce the flattened alternates table to the white-listed names.

    Args:
        alternates_table: Alternate entries keyed by alternate name
        whitelist: White list; no filtering when ``alternate_glyphs`` is None
        log: Receives one warning per white-listed name missing from the table

    Returns:
        ``alternates_table`` itself when there is no alternates white list,
        otherwise a new mapping of the white-listed entries that exist
    """
    if whitelist.alternate_glyphs is None:
        return alternates_table

    log = log if log is not None else AssemblyLogger()
    filtered: dict[str, T] = {}
    for glyph_name in whitelist.alternate_glyphs:
        if glyph_name in alternates_table:
            filtered[glyph_name] = alternates_table[glyph_name]
        else:
            log.log_alternate_skipped(glyph_name)
    return filtered


def select_alternate_groups(
    groups: Mapping[str, T],
    whitelist: WhiteList,
) -> Mapping[str, T]:
    """Keep the alternate groups whose base glyph is a white-listed main glyph.

    Base glyphs missing from ``groups`` are simply glyphs without alternates.

    Returns:
        ``groups`` itself when there is no main white list
    """
    if whitelist.main_glyphs is None:
        return groups
    return {
        glyph_name: groups[glyph_name]
        for glyph_name in whitelist.main_glyphs
        if glyph_name in groups
    }


def flatten_alternates(groups: Mapping[str, Mapping[str, Any]]) -> dict[str, GlyphRecord]:
    """Flatten ``glyphsWithAlternates`` into records keyed by alternate name.

    The base glyph association is discarded. Alternate names are expected to
    be unique across groups; when two groups name the same alternate, the
    group iterated last wins.

    Args:
        groups: ``{base_name: {"alternates": [{"name", "codepoint"}, ...]}}``

    Returns:
        Mapping of alternate name to a record holding only its codepoint
    """
    flattened: dict[str, GlyphRecord] = {}
    for group in groups.values():
        for entry in group.get("alternates", []):
            alternate = AlternateGlyph.from_dict(entry)
            flattened[alternate.name] = GlyphRecord(codepoint=alternate.codepoint)
    return flattened
