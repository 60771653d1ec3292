"""Inline style sanitization.

Filtering runs in two stages. A structural gauntlet first decides whether the
whole value looks like a plain declaration list; if it does not, the entire
value is discarded. Only then are declarations checked one by one against the
policy's property and keyword allow-lists.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .constants import CSS_SHORTHAND_PREFIXES
from .errors import _ERROR_SINK, report_unsafe
from .policy import DEFAULT_POLICY

if TYPE_CHECKING:
    from .errors import ReportCallback
    from .policy import SanitizationPolicy
    from .tokens import SanitizeError

# One level of nested parentheses, so `url(javascript:alert(1))` goes in one piece.
_URL_PATTERN = re.compile(r"url\s*\(\s*(?:[^()]|\([^()]*\))*\)\s*", re.IGNORECASE)

# Possessive repeat: once a prefix is accepted it is never re-split, so a
# failing match is linear in the input length.
_STYLE_CHARS_PATTERN = re.compile(
    r"""(?:\w-\w|'[\s\w]+'|"[\s\w]+"|\([\d,\s]+\)|[-:,;#%.\sa-zA-Z0-9!])*+"""
)
_STYLE_SHAPE_PATTERN = re.compile(r"\s*(?:[-\w]+\s*:[^:;]*(?:;\s*|\Z))*+")

_DECLARATION_PATTERN = re.compile(r"([-\w]+)\s*:\s*([^:;]*)")

_VALUE_TOKEN_PATTERN = re.compile(
    r"#[0-9a-f]+"
    r"|rgb\(\d+%?,\d*%?,?\d*%?\)?"
    r"|(?:\d+(?:\.\d*)?|\.\d+)?(?:cm|em|ex|in|mm|pc|pt|px|%|,|\))?"
)


def strip_css_urls(style: str) -> str:
    return _URL_PATTERN.sub(" ", style)


def passes_gauntlet(style: str) -> bool:
    """True when `style` is made only of safe characters and is shaped like
    a `prop: value; prop: value` list."""
    if _STYLE_CHARS_PATTERN.fullmatch(style) is None:
        return False
    return _STYLE_SHAPE_PATTERN.fullmatch(style) is not None


def _is_safe_shorthand_value(value: str, keywords: frozenset[str]) -> bool:
    for keyword in value.split():
        if keyword in keywords:
            continue
        if _VALUE_TOKEN_PATTERN.fullmatch(keyword) is None:
            return False
    return True


def _sanitize_css(
    style: str,
    policy: SanitizationPolicy,
    report: ReportCallback | None,
    *,
    tag: str | None = None,
) -> str:
    if not style:
        return ""

    if len(style) > policy.max_style_length:
        report_unsafe(
            report,
            "style-too-long",
            f"Unsafe inline style (longer than {policy.max_style_length} characters)",
            tag=tag,
            attr="style",
            category="css",
        )
        return ""

    stripped = strip_css_urls(style)
    if stripped != style:
        report_unsafe(report, "style-url", "Stripped url() from inline style", tag=tag, attr="style", category="css")
    style = stripped

    if not passes_gauntlet(style):
        report_unsafe(report, "style-rejected", "Unsafe inline style (rejected)", tag=tag, attr="style", category="css")
        return ""

    keywords = policy.allowed_css_keywords
    clean: list[str] = []
    for m in _DECLARATION_PATTERN.finditer(style):
        prop, value = m.group(1), m.group(2)
        if not value:
            continue
        prop = prop.lower()

        if prop in policy.allowed_css_properties:
            clean.append(f"{prop}: {value};")
            continue

        if prop.split("-")[0] in CSS_SHORTHAND_PREFIXES:
            if _is_safe_shorthand_value(value, keywords):
                clean.append(f"{prop}: {value};")
                continue
            report_unsafe(
                report,
                "css-value",
                f"Dropped CSS property '{prop}' (unsafe value)",
                tag=tag,
                attr="style",
                category="css",
            )
            continue

        if prop in policy.allowed_svg_properties:
            clean.append(f"{prop}: {value};")
            continue

        report_unsafe(
            report, "css-property", f"Dropped CSS property '{prop}'", tag=tag, attr="style", category="css"
        )

    return " ".join(clean)


def sanitize_css(
    style: str,
    policy: SanitizationPolicy | None = None,
    *,
    report: ReportCallback | None = None,
    errors: list[SanitizeError] | None = None,
) -> str:
    """Return the allowed declarations of an inline `style` value.

    The result is a space-separated list of ``prop: value;`` declarations, or
    the empty string when nothing survives. This never raises.
    """

    policy = policy or DEFAULT_POLICY
    if errors is None:
        return _sanitize_css(str(style), policy, report)

    token = _ERROR_SINK.set(errors)
    try:
        return _sanitize_css(str(style), policy, report)
    finally:
        _ERROR_SINK.reset(token)
