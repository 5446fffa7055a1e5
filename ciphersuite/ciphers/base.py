"""
Cipher Contract
===============
Every cipher in the suite exposes the same four capabilities:

    set_key(text)           validate and store a key
    get_key()               the key as the cipher understands it
    encode(reader, writer)  stream plaintext -> ciphertext
    decode(reader, writer)  stream ciphertext -> plaintext

encode/decode return the number of characters processed. A cipher
instance holds only its key; it can be reused for any number of
independent streams.
"""

import io
from abc import ABC, abstractmethod
from typing import TextIO


class Cipher(ABC):
    """Base class for all ciphers used by the suite."""

    name = ""

    @abstractmethod
    def set_key(self, key: str) -> None:
        """Raises InvalidKeyError if `key` is not valid for this cipher."""

    @abstractmethod
    def get_key(self) -> str:
        ...

    @abstractmethod
    def encode(self, reader: TextIO, writer: TextIO) -> int:
        ...

    @abstractmethod
    def decode(self, reader: TextIO, writer: TextIO) -> int:
        ...

    def encode_string(self, message: str) -> str:
        """Encode an in-memory message."""
        out = io.StringIO()
        self.encode(io.StringIO(message), out)
        return out.getvalue()

    def decode_string(self, message: str) -> str:
        """Decode an in-memory message."""
        out = io.StringIO()
        self.decode(io.StringIO(message), out)
        return out.getvalue()

    def __repr__(self):
        return f"{type(self).__name__}(key={self.get_key()!r})"
