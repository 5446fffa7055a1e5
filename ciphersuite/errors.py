"""
Errors
======
Every failure the toolkit reports derives from CipherError.

Stream failures carry `count`: the number of characters already
processed (and written) when the failure happened. Output written
before the failure is not rolled back.
"""


class CipherError(Exception):
    """Base class for all ciphersuite errors."""


class InvalidKeyError(CipherError, ValueError):
    """The key text is not valid for the target cipher."""


class KeyFileError(CipherError):
    """A key file could not be opened or read."""


class StreamError(CipherError):
    """A transformation stopped before the end of its input."""

    def __init__(self, message: str, count: int = 0):
        super().__init__(message)
        self.count = count
        self.flush_error = None   # set if flushing also failed afterwards


class StreamReadError(StreamError):
    """Reading from the input stream failed."""


class StreamWriteError(StreamError):
    """Writing to (or flushing) the output stream failed."""


class OperationError(StreamError):
    """The per-character offset lookup failed."""
