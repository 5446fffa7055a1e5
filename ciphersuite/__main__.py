"""Allows running the suite via: python -m ciphersuite"""

from .cli import entry_point

if __name__ == "__main__":
    entry_point()
