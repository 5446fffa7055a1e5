"""
Key and stream sourcing for the command line.

Standard input/output are handed out as-is and never closed here;
files are opened as UTF-8 with newline translation off so line
endings pass through the cipher verbatim.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from .errors import KeyFileError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
# Bytes that are not valid UTF-8 pass through the cipher unchanged.
ERRORS   = "surrogateescape"


def read_key_file(path: str) -> str:
    """Read the whole of `path` as a cipher key."""
    try:
        with open(path, "r", encoding=ENCODING) as f:
            key = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise KeyFileError(f"Unable to open Cipher key file '{path}': {e}") from e
    logger.debug("Read %d-character key from %s", len(key), path)
    return key


@contextmanager
def open_input(path: Optional[str] = None) -> Iterator[TextIO]:
    """Yield stdin when no path is given, otherwise the opened file."""
    if not path:
        yield sys.stdin
        return
    with open(path, "r", encoding=ENCODING, errors=ERRORS, newline="") as f:
        yield f


@contextmanager
def open_output(path: Optional[str] = None) -> Iterator[TextIO]:
    """Yield stdout when no path is given, otherwise the created file."""
    if not path:
        yield sys.stdout
        return
    with open(path, "w", encoding=ENCODING, errors=ERRORS, newline="") as f:
        yield f
