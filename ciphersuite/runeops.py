"""
Rune Operations
===============
The two pieces every cipher is built from:

  shift_rune      shift one Latin letter within its case range
  read_all_runes  stream a reader through a per-position shift into a writer

Only A-Z and a-z are shifted. Everything else (digits, punctuation,
whitespace, accented or non-Latin letters) passes through untouched,
so ciphertext keeps the layout of the plaintext.
"""

from typing import Callable, List, TextIO

from .errors import OperationError, StreamError, StreamReadError, StreamWriteError

ALPHABET_SIZE = 26
CHUNK_SIZE    = 4096   # characters per read() call

# Maps a zero-based stream position to the offset for that character.
OffsetFunc = Callable[[int], int]


def shift_rune(ch: str, offset: int) -> str:
    """Shift a single English letter by `offset`, wrapping A<->Z / a<->z."""
    offset %= ALPHABET_SIZE
    if "A" <= ch <= "Z":
        base = ord("A")
    elif "a" <= ch <= "z":
        base = ord("a")
    else:
        return ch
    return chr((ord(ch) - base + offset) % ALPHABET_SIZE + base)


def read_all_runes(reader: TextIO, writer: TextIO, offset_for: OffsetFunc) -> int:
    """
    Read `reader` to the end, shift each character by `offset_for(position)`
    and write the result to `writer` in the same order.

    Returns the number of characters processed.
    Raises StreamReadError / StreamWriteError / OperationError on the
    first failure; the exception's `count` is the characters written
    so far. The writer is flushed on every path out of this function.
    If that flush also fails while an error is already on its way out,
    the first error is raised and the flush failure is kept on its
    `flush_error` attribute.
    """
    total = 0
    try:
        while True:
            try:
                chunk = reader.read(CHUNK_SIZE)
            except (OSError, ValueError) as e:
                raise StreamReadError(f"Read error: {e}", total) from e
            if not chunk:
                break

            shifted: List[str] = []
            for ch in chunk:
                try:
                    offset = offset_for(total)
                except Exception as e:
                    _write(writer, shifted, total)
                    raise OperationError(f"Operation error: {e}", total) from e
                shifted.append(shift_rune(ch, offset))
                total += 1

            _write(writer, shifted, total)
    except StreamError as e:
        try:
            _flush(writer, e.count)
        except StreamWriteError as flush_error:
            e.flush_error = flush_error
        raise

    _flush(writer, total)
    return total


def _write(writer: TextIO, shifted: List[str], total: int) -> None:
    if not shifted:
        return
    try:
        writer.write("".join(shifted))
    except (OSError, ValueError) as e:
        raise StreamWriteError(f"Write error: {e}", total - len(shifted)) from e


def _flush(writer: TextIO, total: int) -> None:
    flush = getattr(writer, "flush", None)
    if flush is None:
        return
    try:
        flush()
    except (OSError, ValueError) as e:
        raise StreamWriteError(f"Write error: {e}", total) from e
