"""Conversion of parsed SVG elements to nested mappings.

Elements become dictionaries: attributes under ``"@"``, children under their
tag name without namespace, repeated children collected into a list.

    <font><font-face units-per-em="1000"/><glyph d="M0 0"/><glyph d="M1 1"/></font>

becomes

    {"font-face": {"@": {"units-per-em": "1000"}},
     "glyph": [{"@": {"d": "M0 0"}}, {"@": {"d": "M1 1"}}]}
"""

from typing import Any


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` part of an element or attribute name."""
    return tag.rsplit("}", 1)[-1]


def element_to_dict(element: Any) -> dict[str, Any]:
    """Convert an element and its descendants to a nested mapping.

    Comments and processing instructions are skipped.

    Args:
        element: An ElementTree or lxml element

    Returns:
        Nested mapping of the element's content
    """
    node: dict[str, Any] = {}
    if element.attrib:
        node["@"] = {local_name(key): value for key, value in element.attrib.items()}

    for child in element:
        if not isinstance(child.tag, str):
            continue
        key = local_name(child.tag)
        value = element_to_dict(child)
        if key not in node:
            node[key] = value
        elif isinstance(node[key], list):
            node[key].append(value)
        else:
            node[key] = [node[key], value]

    return node
