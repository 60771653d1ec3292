"""Sanitization policy (the allow-list configuration).

A policy is an immutable bundle of name sets. Build one at startup and pass it
to the sanitizer, or use `DEFAULT_POLICY`:

    policy = dataclasses.replace(DEFAULT_POLICY, allowed_protocols={"http", "https"})
    sanitize_markup(html, policy=policy)

Every lookup the sanitizer performs is a plain set-membership test, so a single
policy can be shared across threads without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

from .constants import (
    CSS_KEYWORDS,
    CSS_PROPERTIES,
    HTML_ATTRIBUTES,
    HTML_ELEMENTS,
    MATHML_ATTRIBUTES,
    MATHML_ELEMENTS,
    PROTOCOLS,
    SVG_ALLOW_LOCAL_HREF,
    SVG_ATTR_VAL_ALLOWS_REF,
    SVG_ATTRIBUTES,
    SVG_CSS_PROPERTIES,
    SVG_ELEMENTS,
    URI_ATTRIBUTES,
    VOID_ELEMENTS,
)

if TYPE_CHECKING:
    from collections.abc import Collection


@dataclass(frozen=True, slots=True)
class SanitizationPolicy:
    """An allow-list driven policy for sanitizing XHTML, MathML and SVG.

    - Elements not in `allowed_elements` are escaped as text.
    - Attributes not in `allowed_attributes` are dropped.
    - Attributes in `uri_attributes` must use a scheme from `allowed_protocols`
      (or no scheme at all).
    - `svg_attr_val_allows_ref` attributes may only keep `url(#fragment)`
      references.
    - `xlink:href` on `svg_allow_local_href` elements must be a fragment.
    - Inline styles keep only `allowed_css_properties`, the
      background/border/margin/padding families with values made of
      `allowed_css_keywords` or numeric/color literals, and
      `allowed_svg_properties`.
    - Elements in `void_elements` always serialize self-closing.

    Style values longer than `max_style_length` are rejected outright.
    """

    allowed_elements: Collection[str] = HTML_ELEMENTS | MATHML_ELEMENTS | SVG_ELEMENTS
    allowed_attributes: Collection[str] = HTML_ATTRIBUTES | MATHML_ATTRIBUTES | SVG_ATTRIBUTES
    allowed_css_properties: Collection[str] = CSS_PROPERTIES
    allowed_css_keywords: Collection[str] = CSS_KEYWORDS
    allowed_svg_properties: Collection[str] = SVG_CSS_PROPERTIES
    allowed_protocols: Collection[str] = PROTOCOLS
    uri_attributes: Collection[str] = URI_ATTRIBUTES
    svg_attr_val_allows_ref: Collection[str] = SVG_ATTR_VAL_ALLOWS_REF
    svg_allow_local_href: Collection[str] = SVG_ALLOW_LOCAL_HREF
    void_elements: Collection[str] = VOID_ELEMENTS

    max_style_length: int = 4096

    def __post_init__(self) -> None:
        # Accept lists/tuples/sets from user code, normalize for internal use.
        for f in fields(self):
            if f.name == "max_style_length":
                continue
            value = getattr(self, f.name)
            if isinstance(value, frozenset):
                continue
            if isinstance(value, (str, bytes)):
                raise TypeError(f"{f.name} must be a collection of names, not {type(value).__name__}")
            object.__setattr__(self, f.name, frozenset(str(v) for v in value))

        if type(self.max_style_length) is not int:
            raise TypeError("max_style_length must be an int")
        if self.max_style_length <= 0:
            raise ValueError("max_style_length must be positive")


DEFAULT_POLICY: SanitizationPolicy = SanitizationPolicy()
