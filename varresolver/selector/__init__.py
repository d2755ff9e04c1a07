"""Path expression parsing and Value tree navigation."""

from .coercion import coerce, equal_coerced, render
from .navigate import navigate, select
from .paths import is_filter_token, parse_filter_token, parse_path

__all__ = [
    "coerce",
    "equal_coerced",
    "render",
    "navigate",
    "select",
    "is_filter_token",
    "parse_filter_token",
    "parse_path",
]
