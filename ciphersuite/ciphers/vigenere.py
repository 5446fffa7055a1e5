"""
Vigenère Cipher
===============
Repeating-keyword substitution. Each letter of the key gives an
offset (A=0 ... Z=25) and the offsets cycle over the message:

    key      L  E  M  O  N  L  E  M  O  N  L  E
    message  A  T  T  A  C  K  A  T  D  A  W  N
    result   L  X  F  O  P  V  E  F  R  N  H  R

The key position advances on every character of the stream,
including spaces and punctuation, not only on letters.

A single-letter key is a Caesar cipher: "D" is the same as offset 3.

Key format: any text containing at least one Latin letter. It is
upper-cased and everything outside A-Z is dropped ("lemon!" -> "LEMON").

Historical note: Giovan Battista Bellaso, 1553, later attributed to
Blaise de Vigenère. Broken by Kasiski in 1863. Educational only.
"""

import re
from typing import List, TextIO

from ..errors import InvalidKeyError
from ..runeops import read_all_runes
from .base import Cipher

_NOT_KEY_LETTER = re.compile(r"[^A-Z]")


def clean_key(key: str) -> str:
    """
    Upper-case `key` one character at a time and strip everything that
    is not A-Z. Characters whose upper case is more than one letter
    ("ß" -> "SS") are dropped, not expanded.
    """
    upper = "".join(u for u in map(str.upper, key) if len(u) == 1)
    return _NOT_KEY_LETTER.sub("", upper)


def key_offsets(clean: str) -> List[int]:
    """Offsets for a cleaned key: A=0, B=1 ... Z=25."""
    return [ord(c) - ord("A") for c in clean]


class VigenereCipher(Cipher):
    """Shift each letter by the next offset of a repeating keyword."""

    name = "vigenere"

    def __init__(self):
        self._key     = ""
        self._offsets = []

    @property
    def keyed(self) -> bool:
        return bool(self._offsets)

    @property
    def offsets(self) -> List[int]:
        return list(self._offsets)

    def set_key(self, key: str) -> None:
        """
        Clean `key` and derive its offset sequence.
        A key with no letters left after cleaning is rejected and any
        previously set key is discarded.
        """
        clean = clean_key(key)
        if not clean:
            self._key     = ""
            self._offsets = []
            raise InvalidKeyError("Invalid key. Must contain at least 1 letter.")
        self._key     = clean
        self._offsets = key_offsets(clean)

    def get_key(self) -> str:
        """The cleaned keyword, e.g. "LEMON" for "lemon"."""
        return self._key

    def encode(self, reader: TextIO, writer: TextIO) -> int:
        return self._process(reader, writer, 1)

    def decode(self, reader: TextIO, writer: TextIO) -> int:
        return self._process(reader, writer, -1)

    def _process(self, reader: TextIO, writer: TextIO, sign: int) -> int:
        if not self._offsets:
            raise InvalidKeyError("Vigenère key has not been set.")
        offsets = [sign * o for o in self._offsets]
        period  = len(offsets)
        return read_all_runes(reader, writer, lambda pos: offsets[pos % period])
