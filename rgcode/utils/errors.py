"""
Custom exception types for the rgcode parse/transmit pipeline.

Malformed program text is never an exception: it is reported as a
ParseDiagnostic. These types cover the conditions that are fatal to an
operation as a whole.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rgcode.protocol.types import ParseDiagnostic


class RgcodeError(Exception):
    """Base class for rgcode failures."""

    prefix = "RGCODE ERROR"

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"{self.prefix}: {message}")

    def __str__(self):
        return f"{self.prefix}: {self.original_message}"


class ProgramParseError(RgcodeError):
    """A program contains lines that did not parse."""

    prefix = "Program Parse Error"

    def __init__(self, diagnostics: list[ParseDiagnostic]):
        self.diagnostics = list(diagnostics)
        lines = ", ".join(str(d.line_number) for d in self.diagnostics)
        super().__init__(f"{len(self.diagnostics)} invalid line(s): {lines}")


class DocumentSourceError(RgcodeError):
    """The program document could not be obtained."""

    prefix = "Document Source Error"


class TransportError(RgcodeError):
    """Serial link failure (closed port, write/read error)."""

    prefix = "Transport Error"
