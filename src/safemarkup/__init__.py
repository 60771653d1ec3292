from .css import sanitize_css
from .errors import emit_error
from .policy import DEFAULT_POLICY, SanitizationPolicy
from .sanitize import ElementAction, classify, filter_attributes, sanitize_markup
from .tokenizer import Tokenizer, tokenize
from .tokens import SanitizeError, Tag, Text

__all__ = [
    "DEFAULT_POLICY",
    "ElementAction",
    "SanitizationPolicy",
    "SanitizeError",
    "Tag",
    "Text",
    "Tokenizer",
    "classify",
    "emit_error",
    "filter_attributes",
    "sanitize_css",
    "sanitize_markup",
    "tokenize",
]
