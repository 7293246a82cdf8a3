"""
Document parser for robot-arm G-code.

Runs the tokenizer and the command extractor over a whole program. Every
non-blank line yields exactly one ParsedLine, in source order; a bad line
never stops the parse.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from rgcode.protocol.types import CommandType, ParseDiagnostic, ParsedLine
from rgcode.utils.errors import ProgramParseError

from .extractor import extract
from .tokenizer import iter_tokens

logger = logging.getLogger(__name__)


def iter_parse(document: str) -> Iterator[ParsedLine]:
    """Lazily parse a document, one ParsedLine per non-blank line."""
    for line in iter_tokens(document):
        result = extract(
            line.mnemonic,
            line.args,
            line_number=line.line_number,
            raw_line=line.raw_line,
        )
        yield ParsedLine(line.line_number, line.raw_line, result)


@dataclass
class ParseReport:
    """Results of parsing one program"""

    lines: list[ParsedLine] = field(default_factory=list)

    def __iter__(self):
        return iter(self.lines)

    def __len__(self):
        return len(self.lines)

    @property
    def ok(self) -> bool:
        return all(line.ok for line in self.lines)

    @property
    def commands(self) -> list[CommandType]:
        """Successfully parsed commands, in source order."""
        return [line.result for line in self.lines if line.ok]  # type: ignore[misc]

    @property
    def diagnostics(self) -> list[ParseDiagnostic]:
        """Diagnostics for the lines that failed, in source order."""
        return [line.result for line in self.lines if isinstance(line.result, ParseDiagnostic)]

    def raise_for_errors(self) -> list[CommandType]:
        """
        Return the command list, or raise if any line failed.

        Raises:
            ProgramParseError: carrying every diagnostic of the program
        """
        diagnostics = self.diagnostics
        if diagnostics:
            raise ProgramParseError(diagnostics)
        return self.commands


def parse_document(document: str) -> ParseReport:
    """
    Parse a complete program.

    Args:
        document: Full program text

    Returns:
        ParseReport with one entry per non-blank line
    """
    report = ParseReport(list(iter_parse(document)))

    for diagnostic in report.diagnostics:
        logger.warning(
            "Line %d: %s (%s)",
            diagnostic.line_number,
            diagnostic.reason.value,
            diagnostic.raw_line,
        )
    logger.info(
        "Parsed %d line(s): %d command(s), %d error(s)",
        len(report),
        len(report) - len(report.diagnostics),
        len(report.diagnostics),
    )
    return report
