"""
Cipher Registry
===============
Name -> cipher class lookup used by the command line.
Names are matched case- and whitespace-insensitively.
"""

import logging
from typing import Dict, List, Optional, Type

from .ciphers.base     import Cipher
from .ciphers.caesar   import CaesarCipher
from .ciphers.vigenere import VigenereCipher

logger = logging.getLogger(__name__)

CIPHERS: Dict[str, Type[Cipher]] = {
    CaesarCipher.name:   CaesarCipher,
    VigenereCipher.name: VigenereCipher,
}


def get_cipher_from_name(name: str) -> Optional[Cipher]:
    """Return a fresh, unkeyed cipher for `name`, or None if unknown."""
    cls = CIPHERS.get(name.strip().lower())
    if cls is None:
        logger.debug("No cipher registered as %r", name)
        return None
    return cls()


def available_ciphers() -> List[str]:
    return sorted(CIPHERS)
