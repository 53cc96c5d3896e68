"""Write SVG markup from element dictionaries.

An element is a dict with a ``tag`` key, optional ``children`` (list of
elements) and ``text`` (character data); every other key is an attribute.
"""

from __future__ import annotations

import re
from typing import Any
from xml.sax.saxutils import escape

_RESERVED = ("tag", "children", "text", "comment")
_ATTR_ENTITIES = {'"': "&quot;"}
_DASH_RUN_RE = re.compile(r"-{2,}")


def fmt(value: float) -> str:
    """Format a coordinate with at most two decimals and no trailing ``.0``."""
    r = round(float(value), 2)
    if r == 0:
        return "0"
    if r.is_integer():
        return str(int(r))
    return str(r)


def _attr_str(elem: dict[str, Any]) -> str:
    parts = []
    for key, value in elem.items():
        if key in _RESERVED or value is None:
            continue
        if isinstance(value, float):
            value = fmt(value)
        parts.append(f'{key}="{escape(str(value), _ATTR_ENTITIES)}"')
    return " ".join(parts)


def serialize_element(elem: dict[str, Any], depth: int = 1) -> list[str]:
    pad = "  " * depth
    tag = elem.get("tag", "g")
    attrs = _attr_str(elem)
    open_tag = f"<{tag} {attrs}" if attrs else f"<{tag}"
    lines: list[str] = []

    if elem.get("comment"):
        # "--" may not appear inside a comment
        note = _DASH_RUN_RE.sub("-", escape(str(elem["comment"]))).rstrip("-")
        lines.append(f"{pad}<!-- {note} -->")

    children = elem.get("children") or []
    text = elem.get("text")
    if children:
        lines.append(f"{pad}{open_tag}>")
        for child in children:
            lines.extend(serialize_element(child, depth + 1))
        lines.append(f"{pad}</{tag}>")
    elif text is not None:
        lines.append(f"{pad}{open_tag}>{escape(str(text))}</{tag}>")
    else:
        lines.append(f"{pad}{open_tag} />")
    return lines


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
) -> str:
    """Generate a standalone SVG document sized ``canvas_w`` x ``canvas_h`` pixels."""
    w, h = fmt(canvas_w), fmt(canvas_h)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}"'
        f' viewBox="0 0 {w} {h}" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        lines.extend(serialize_element(elem))

    lines.append("</svg>")
    return "\n".join(lines)
