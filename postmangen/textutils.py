"""Small string helpers used when splitting paths and naming routes."""

from __future__ import annotations

from collections.abc import Iterable


def clear_parts(items: Iterable[str]) -> list[str]:
    """Drop empty items, remove tabs and strip spaces from the rest."""
    return [item.replace("\t", "").strip(" ") for item in items if item]


def name_up(text: str) -> str:
    """Turn ``get-list`` into ``GetList``; names with ``{`` give ``""``."""
    if "{" in text:
        return ""
    chars = iter(text)
    first = next(chars, None)
    if first is None:
        return ""
    parts = [first.upper()]
    for char in chars:
        if char == "-":
            following = next(chars, None)
            if following is None:
                raise ValueError(f"name ends with a hyphen: {text!r}")
            parts.append(following.upper())
        else:
            parts.append(char)
    return "".join(parts)