"""
ciphersuite
===========
Classical letter-substitution ciphers over streaming text.

Ciphers:
    caesar    - fixed offset (every letter shifted by the same amount)
    vigenere  - repeating keyword (offsets cycle over the message)

Only A-Z / a-z are shifted; case is kept and every other character
passes through unchanged. No cryptographic security is claimed.

Quick use:
    >>> from ciphersuite import CaesarCipher
    >>> c = CaesarCipher()
    >>> c.set_key("3")
    >>> c.encode_string("Attack at dawn!")
    'Dwwdfn dw gdzq!'

Author : ciphersuite contributors  |  ciphersuite
License: Apache 2.0
"""

__version__  = "1.0.0"
__author__   = "ciphersuite contributors"
__project__  = "ciphersuite"

from .errors             import (CipherError, InvalidKeyError, KeyFileError, OperationError,
                                 StreamError, StreamReadError, StreamWriteError)
from .runeops            import shift_rune, read_all_runes
from .ciphers.base       import Cipher
from .ciphers.caesar     import CaesarCipher
from .ciphers.vigenere   import VigenereCipher, clean_key, key_offsets
from .registry           import get_cipher_from_name, available_ciphers

__all__ = [
    "Cipher",
    "CaesarCipher",
    "VigenereCipher",
    "shift_rune",
    "read_all_runes",
    "clean_key",
    "key_offsets",
    "get_cipher_from_name",
    "available_ciphers",
    "CipherError",
    "InvalidKeyError",
    "KeyFileError",
    "StreamError",
    "StreamReadError",
    "StreamWriteError",
    "OperationError",
]
