"""
Tokenizer for robot-arm G-code documents.

Splits a document into non-blank lines and each line into whitespace
separated tokens. Purely lexical: no mnemonic or numeric knowledge.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from rgcode.config import TRACE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineTokens:
    """Tokens of one non-blank source line"""

    line_number: int  # 1-based, blank lines included in the count
    mnemonic: str
    args: tuple[str, ...]
    raw_line: str = ""  # trimmed source text

    @property
    def tokens(self) -> tuple[str, ...]:
        return (self.mnemonic, *self.args)

    def __str__(self):
        return " ".join(self.tokens)


def iter_tokens(document: str) -> Iterator[LineTokens]:
    """
    Lazily tokenize a document.

    Args:
        document: Full program text, newline delimited

    Yields:
        LineTokens for every line that is non-empty after trimming
    """
    for index, line in enumerate(document.split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        terms = stripped.split()
        logger.log(TRACE, "Line %d terms: %s", index, terms)
        yield LineTokens(
            line_number=index,
            mnemonic=terms[0],
            args=tuple(terms[1:]),
            raw_line=stripped,
        )


def tokenize(document: str) -> list[LineTokens]:
    """Tokenize a whole document into an ordered list of LineTokens."""
    return list(iter_tokens(document))
