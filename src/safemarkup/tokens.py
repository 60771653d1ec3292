from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Tag:
    """A start or end tag as it appeared in the source.

    `attrs` maps attribute names to their raw (still entity-encoded) values.
    A value of ``None`` marks a boolean attribute written without ``=``. The
    mapping is copied into a read-only view on construction.
    `raw` is the exact source text of the tag, used when the tag is escaped.
    """

    START = 0
    END = 1

    kind: int
    name: str
    attrs: Mapping[str, str | None] = field(default_factory=dict)
    self_closing: bool = False
    raw: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))

    @property
    def is_end_tag(self) -> bool:
        return self.kind == Tag.END


@dataclass(frozen=True, slots=True)
class Text:
    """A run of character data (also comments, doctypes and stray `<`)."""

    data: str


Token = Tag | Text


@dataclass(frozen=True, slots=True)
class SanitizeError:
    """A record of one construct the sanitizer removed or neutralized.

    These are findings, not exceptions: sanitization never raises on input.
    """

    code: str
    message: str
    tag: str | None = None
    attr: str | None = None
    category: str = "sanitize"

    def __str__(self) -> str:
        return f"({self.category}) {self.code}: {self.message}"
