"""Serialization of kept and escaped tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def serialize_start_tag(name: str, attrs: Mapping[str, str] | None, *, self_closing: bool = False) -> str:
    """Serialize a start tag.

    Attribute values must already be entity-encoded; they are written inside
    double quotes as-is.
    """
    parts: list[str] = ["<", name]
    if attrs:
        for key, value in attrs.items():
            parts.append(f' {key}="{value}"')
    parts.append(" />" if self_closing else ">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def escape_tag_text(raw: str) -> str:
    # Only the angle brackets: the tag becomes visible text, nothing else changes.
    return raw.replace("<", "&lt;").replace(">", "&gt;")
