"""Formatting utilities for notemancy notes."""

from .directives import run_directives, strip_directives
from .formatter import FormatResult, MarkdownFormatter, format_note
from .transformer import WikiLinkTransformer, transform_inline

__all__ = [
    "format_note",
    "FormatResult",
    "MarkdownFormatter",
    "WikiLinkTransformer",
    "run_directives",
    "strip_directives",
    "transform_inline",
]
