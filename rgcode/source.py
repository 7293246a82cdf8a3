"""
Program document source.

Reads `.rgcf` program files from disk. Failing to obtain the document is the
only condition fatal to a whole parse.
"""

import logging
from pathlib import Path

from rgcode.config import PROGRAM_ENCODING, PROGRAM_SUFFIX
from rgcode.utils.errors import DocumentSourceError

logger = logging.getLogger(__name__)


def read_document(path: str | Path) -> str:
    """
    Read a program file.

    Args:
        path: Path to the program, normally ending in .rgcf

    Returns:
        The full document text

    Raises:
        DocumentSourceError: if the file is missing, unreadable or not text
    """
    program_path = Path(path)
    if program_path.suffix.lower() != PROGRAM_SUFFIX:
        logger.warning(f"{program_path} does not have the {PROGRAM_SUFFIX} extension")

    try:
        document = program_path.read_text(encoding=PROGRAM_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentSourceError(f"Failed to read {program_path}: {e}") from e

    logger.info(f"Read program {program_path} ({len(document)} chars)")
    return document
