"""
Caesar Cipher
=============
Fixed-offset substitution: every letter in the message is shifted by
the same number of places. Key "3" turns "Attack" into "Dwwdfn".

Key format: a base-10 signed integer ("3", "-5", "+29").
Any magnitude is accepted; offsets are taken modulo 26.

Historical note: used by Julius Caesar for military correspondence.
Breakable by hand in 26 tries. Educational only.
"""

import re
from typing import TextIO

from ..errors import InvalidKeyError
from ..runeops import read_all_runes
from .base import Cipher

_INT_KEY = re.compile(r"[+-]?[0-9]+")


class CaesarCipher(Cipher):
    """Shift every letter by one constant offset."""

    name = "caesar"

    def __init__(self):
        self._offset = 0
        self._keyed  = False

    @property
    def keyed(self) -> bool:
        return self._keyed

    @property
    def offset(self) -> int:
        return self._offset

    def set_key(self, key: str) -> None:
        """
        Parse `key` as an integer offset. Surrounding whitespace is
        ignored so keys read from files work as-is.
        On failure the offset falls back to 0 and the cipher is unkeyed.
        """
        text = key.strip()
        if not _INT_KEY.fullmatch(text):
            self._offset = 0
            self._keyed  = False
            raise InvalidKeyError(
                f"Invalid key {key!r}. Caesar key must be a whole number."
            )
        self._offset = int(text)
        self._keyed  = True

    def get_key(self) -> str:
        return str(self._offset)

    def encode(self, reader: TextIO, writer: TextIO) -> int:
        offset = self._offset
        return read_all_runes(reader, writer, lambda _pos: offset)

    def decode(self, reader: TextIO, writer: TextIO) -> int:
        offset = -self._offset
        return read_all_runes(reader, writer, lambda _pos: offset)
