"""Entity decode/encode primitives.

`normalize_text` is decode-then-encode. Running it twice gives the same result
as running it once, which is what keeps the sanitizer idempotent and defeats
double-encoded payloads such as ``&amp;lt;script&amp;gt;``.
"""

from __future__ import annotations

import html


def decode_entities(text: str) -> str:
    """Resolve named and numeric character references."""
    if "&" not in text:
        return text
    return html.unescape(text)


def encode_entities(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and both quote characters."""
    return html.escape(text, quote=True)


def normalize_text(text: str) -> str:
    return encode_entities(decode_entities(text))
