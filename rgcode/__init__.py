"""
rgcode Python Package

Translates robot-arm G-code programs (.rgcf) into a typed instruction set
for the motor-control executor.

Key components:
- parse_document: Parse a whole program into per-line results
- extract: Build one typed command from a mnemonic and its arguments
- tokenize: Split a program into non-blank lines of tokens
- SerialTransport: Stream a parsed program to the arm controller
"""

from ._version import __version__
from .gcode import ParseReport, extract, parse_document, tokenize
from .protocol.types import CommandType, DiagnosticReason, ParseDiagnostic, ParsedLine
from .transports import SerialTransport

__all__ = [
    "__version__",
    "parse_document",
    "extract",
    "tokenize",
    "ParseReport",
    "ParsedLine",
    "ParseDiagnostic",
    "DiagnosticReason",
    "CommandType",
    "SerialTransport",
]
