"""
Robot-arm G-code parsing.

Main components:
- tokenizer.py: split a document into lines and whitespace tokens
- extractor.py: command table and typed command construction
- parser.py: whole-document pipeline with per-line diagnostics
- diagnostics.py: operator-facing formatting of results
"""

from .diagnostics import format_diagnostic, format_line
from .extractor import AXIS_TABLE, COMMAND_TABLE, extract, parse_float32
from .parser import ParseReport, iter_parse, parse_document
from .tokenizer import LineTokens, iter_tokens, tokenize

__all__ = [
    "LineTokens",
    "tokenize",
    "iter_tokens",
    "COMMAND_TABLE",
    "AXIS_TABLE",
    "extract",
    "parse_float32",
    "ParseReport",
    "parse_document",
    "iter_parse",
    "format_diagnostic",
    "format_line",
]
