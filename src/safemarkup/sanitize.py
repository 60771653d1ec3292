"""Allow-list sanitization of XHTML (with MathML and SVG).

The sanitizer works on a flat token stream rather than a tree: every token is
filtered on its own, using nothing but the token and the policy.

- Tags whose name is not allowed are escaped and shown as text.
- Allowed tags keep only allowed attributes; URI-valued attributes must use an
  allowed scheme; SVG references must stay inside the document; `style` values
  go through `sanitize_css`.
- Text is entity-decoded once and re-encoded.

    >>> sanitize_markup('<a href="javascript:alert(1)">x</a>')
    '<a>x</a>'
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING

from .css import _sanitize_css
from .entities import decode_entities, normalize_text
from .errors import _ERROR_SINK, report_unsafe
from .policy import DEFAULT_POLICY
from .serialize import escape_tag_text, serialize_end_tag, serialize_start_tag
from .tokenizer import Tokenizer
from .tokens import Tag

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .errors import ReportCallback
    from .policy import SanitizationPolicy
    from .tokens import SanitizeError, Token


class ElementAction(str, Enum):
    KEEP = "keep"
    ESCAPE = "escape"


# Characters browsers ignore inside a scheme: backticks, ASCII controls and
# whitespace, and U+0080..U+00A0 (UTF-8 \xc2\x80..\xc2\xa0 once decoded).
_URI_NOISE_PATTERN = re.compile(r"[`\x00-\x20\x7f\s\u0080-\u00a0]+")
_URI_SCHEME_PATTERN = re.compile(r"[a-z0-9][-+.a-z0-9]*:")
# One level of nested parentheses; possessive so an unclosed `url(` fails
# without rescanning the rest of the value.
_SVG_NONLOCAL_URL_PATTERN = re.compile(r"url\s*\(\s*+(?!#)(?:[^()]|\([^()]*+\))++\)", re.IGNORECASE)


def classify(tag_name: str, policy: SanitizationPolicy | None = None) -> ElementAction:
    """Decide whether a tag is kept as markup or escaped as text."""
    policy = policy or DEFAULT_POLICY
    if tag_name in policy.allowed_elements:
        return ElementAction.KEEP
    return ElementAction.ESCAPE


def uri_scheme(value: str) -> str | None:
    """Return the lowercased scheme a browser would see in `value`, if any.

    `value` is entity-decoded and stripped of characters that browsers skip
    when parsing a scheme, so ``jav&#x09;ascript:`` reports ``javascript``.
    """

    cleaned = _URI_NOISE_PATTERN.sub("", decode_entities(value)).lower()
    if _URI_SCHEME_PATTERN.match(cleaned) is None:
        return None
    return cleaned.split(":", 1)[0]


def strip_nonlocal_svg_urls(value: str) -> str:
    return _SVG_NONLOCAL_URL_PATTERN.sub(" ", value)


def filter_attributes(
    tag_name: str,
    attrs: Mapping[str, str | None],
    policy: SanitizationPolicy | None = None,
    *,
    report: ReportCallback | None = None,
    node: Token | None = None,
) -> dict[str, str]:
    """Return the attributes of a kept tag that survive the policy.

    The input mapping is not modified. Surviving values are entity-normalized
    (and, for `style`, CSS-sanitized) and ready to serialize in double quotes.
    """

    policy = policy or DEFAULT_POLICY
    out: dict[str, str] = {}

    for key, raw_value in attrs.items():
        if raw_value is None or key not in policy.allowed_attributes:
            report_unsafe(
                report, "attr-not-allowed", f"Unsafe attribute '{key}' (not allowed)", node=node, tag=tag_name, attr=key
            )
            continue

        value = normalize_text(raw_value)

        if key in ("href", "xlink:href") and tag_name in policy.svg_allow_local_href:
            if not decode_entities(value).lstrip().startswith("#"):
                report_unsafe(
                    report,
                    "nonlocal-href",
                    f"Unsafe local reference in attribute '{key}'",
                    node=node,
                    tag=tag_name,
                    attr=key,
                )
                continue

        if key in policy.uri_attributes:
            scheme = uri_scheme(value)
            if scheme is not None and scheme not in policy.allowed_protocols:
                report_unsafe(
                    report, "unsafe-url", f"Unsafe URL in attribute '{key}'", node=node, tag=tag_name, attr=key
                )
                continue

        if key in policy.svg_attr_val_allows_ref:
            stripped = strip_nonlocal_svg_urls(value)
            if stripped != value:
                report_unsafe(
                    report,
                    "nonlocal-ref",
                    f"Stripped non-local url() from attribute '{key}'",
                    node=node,
                    tag=tag_name,
                    attr=key,
                )
            value = stripped

        if key == "style":
            value = _sanitize_css(value, policy, report, tag=tag_name)

        out[key] = value

    return out


def _sanitize_tag(token: Tag, policy: SanitizationPolicy, report: ReportCallback | None) -> str:
    name = token.name
    if classify(name, policy) is ElementAction.ESCAPE:
        report_unsafe(report, "tag-escaped", f"Unsafe tag '{name}' (escaped)", node=token, tag=name)
        return escape_tag_text(token.raw)

    if token.is_end_tag:
        return serialize_end_tag(name)

    attrs = filter_attributes(name, token.attrs, policy, report=report, node=token)
    self_closing = token.self_closing or name in policy.void_elements
    return serialize_start_tag(name, attrs, self_closing=self_closing)


def _sanitize_tokens(tokenizer: Tokenizer, policy: SanitizationPolicy, report: ReportCallback | None) -> str:
    pieces: list[str] = []
    while (token := tokenizer.next_token()) is not None:
        if type(token) is Tag:
            pieces.append(_sanitize_tag(token, policy, report))
        else:
            pieces.append(normalize_text(token.data))
    return "".join(pieces)


def sanitize_markup(
    text: str | bytes,
    policy: SanitizationPolicy | None = None,
    *,
    report: ReportCallback | None = None,
    errors: list[SanitizeError] | None = None,
) -> str:
    """Sanitize untrusted XHTML for display.

    `text` may be bytes, in which case it is decoded as UTF-8 with invalid
    sequences replaced. Pass `errors=[]` to collect a `SanitizeError` for
    every escaped tag and dropped attribute or declaration, or `report` to be
    called with a message for each.

    This never raises on input: malformed markup degrades to escaped text.
    """

    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    policy = policy or DEFAULT_POLICY
    tokenizer = Tokenizer(str(text))

    if errors is None:
        return _sanitize_tokens(tokenizer, policy, report)

    sink_token = _ERROR_SINK.set(errors)
    try:
        return _sanitize_tokens(tokenizer, policy, report)
    finally:
        _ERROR_SINK.reset(sink_token)
