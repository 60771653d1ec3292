"""A lenient markup scanner producing `Tag` and `Text` tokens.

This is not an HTML5 tokenizer. It splits source text into tag-shaped chunks
and character data, the way feed sanitizers traditionally have, and never
fails: anything that does not look like a tag comes back as `Text`.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .tokens import Tag, Text

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .tokens import Token

_TAG_HEAD_PATTERN = re.compile(r"</?([-:\w]+)")
_ATTR_PATTERN = re.compile(r"""([-\w:.]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?""")
_SELF_CLOSING_PATTERN = re.compile(r"""(?:^|[\s"'])/\s*$""")


def _parse_attrs(body: str) -> dict[str, str | None]:
    attrs: dict[str, str | None] = {}
    for m in _ATTR_PATTERN.finditer(body):
        name = m.group(1)
        if name in attrs:
            continue
        if m.group(2) is not None:
            value: str | None = m.group(2)
        elif m.group(3) is not None:
            value = m.group(3)
        else:
            value = m.group(4)
        attrs[name] = value
    return attrs


def _parse_tag(raw: str) -> Token:
    m = _TAG_HEAD_PATTERN.match(raw)
    if m is None or not raw.endswith(">"):
        return Text(raw)

    kind = Tag.END if raw.startswith("</") else Tag.START
    body = raw[m.end() : -1]
    if body and not (body[0].isspace() or body[0] == "/"):
        # e.g. `<a"x">`: the name runs straight into junk.
        return Text(raw)

    self_closing = False
    if _SELF_CLOSING_PATTERN.search(body):
        self_closing = True
        body = body[: body.rindex("/")]

    attrs = _parse_attrs(body) if kind == Tag.START else {}
    return Tag(kind, m.group(1), attrs, self_closing, raw)


class Tokenizer:
    """Pull tokens from `text` one at a time (or iterate over it)."""

    __slots__ = ("length", "pos", "text")

    text: str
    pos: int
    length: int

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.length = len(text)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def next_token(self) -> Token | None:
        """Return the next token, or None at end of input."""
        pos = self.pos
        if pos >= self.length:
            return None

        text = self.text
        if text[pos] != "<":
            end = text.find("<", pos)
            if end == -1:
                end = self.length
            self.pos = end
            return Text(text[pos:end])

        end = self._scan_markup_end(pos)
        self.pos = end
        raw = text[pos:end]
        if raw.startswith(("<!", "<?")):
            return Text(raw)
        return _parse_tag(raw)

    def _find_after(self, needle: str, start: int) -> int:
        idx = self.text.find(needle, start)
        if idx == -1:
            return self.length
        return idx + len(needle)

    def _scan_markup_end(self, start: int) -> int:
        text = self.text
        if text.startswith("<!--", start):
            return self._find_after("-->", start + 4)
        if text.startswith("<![CDATA[", start):
            return self._find_after("]]>", start + 9)
        if text.startswith(("<!", "<?"), start):
            return self._find_after(">", start + 2)

        if _TAG_HEAD_PATTERN.match(text, start) is None:
            # A lone `<` (e.g. "a < b"): emit it as text and carry on.
            return start + 1

        # Tag: run to the next `>` that is not inside a quoted region.
        i = start + 1
        length = self.length
        while i < length:
            ch = text[i]
            if ch == ">":
                return i + 1
            if ch == '"' or ch == "'":
                close = text.find(ch, i + 1)
                if close == -1:
                    return length
                i = close + 1
                continue
            i += 1
        return length


def tokenize(text: str) -> list[Token]:
    return list(Tokenizer(text))
