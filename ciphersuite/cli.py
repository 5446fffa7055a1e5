"""
ciphersuite command line
========================
    ciphersuite encode -c caesar   -k 3       -i plain.txt -o secret.txt
    ciphersuite decode -c vigenere -x key.txt < secret.txt
    ciphersuite list

The key comes from --key, else --keyfile, else the CIPHERSUITE_KEY
environment variable. Input defaults to stdin, output to stdout.

Exit codes: 0 = OK, 1 = error.
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Mapping, Optional

from . import __version__
from .errors import CipherError
from .registry import available_ciphers, get_cipher_from_name
from .util import open_input, open_output, read_key_file

logger = logging.getLogger(__name__)

KEY_ENV = "CIPHERSUITE_KEY"


@dataclass(frozen=True)
class CipherConfig:
    """Everything one encode/decode run needs, built once from the CLI."""

    cipher_name: str
    key:         Optional[str] = None
    key_file:    Optional[str] = None
    input_file:  Optional[str] = None
    output_file: Optional[str] = None
    verbose:     bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace,
                  environ: Optional[Mapping[str, str]] = None) -> "CipherConfig":
        environ = os.environ if environ is None else environ
        key = args.key
        if not key and not args.keyfile:
            key = environ.get(KEY_ENV) or None
        return cls(
            cipher_name=args.cipher,
            key=key,
            key_file=args.keyfile,
            input_file=args.input,
            output_file=args.output,
            verbose=args.verbose,
        )

    def resolve_key(self) -> str:
        """A literal key wins over a key file."""
        if self.key:
            return self.key
        if self.key_file:
            return read_key_file(self.key_file)
        raise CipherError(
            f"Must specify either a Cipher key or key file (or set {KEY_ENV})"
        )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ciphersuite",
        description="Encode and decode messages with classical letter-shift ciphers.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command", required=True)

    for command, verb in (("encode", "encoded"), ("decode", "decoded")):
        sp = sub.add_parser(
            command,
            help=f"{command.capitalize()} a message using a cipher",
            description=(
                f"{command.capitalize()} a message using a cipher. The message is read "
                f"from a file or, if no file is given, from STDIN. The {verb} message "
                "is written to a file or STDOUT."
            ),
        )
        sp.add_argument("-c", "--cipher", required=True,
                        help=f"The name of the cipher to use ({', '.join(available_ciphers())})")
        sp.add_argument("-k", "--key", help="The key to use for the specified cipher")
        sp.add_argument("-x", "--keyfile",
                        help="A file containing the key to use for the specified cipher")
        sp.add_argument("-i", "--input", help=f"The file whose contents will be {verb}")
        sp.add_argument("-o", "--output", help=f"The file to write the {verb} message into")
        sp.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")

    sub.add_parser("list", help="List the available ciphers")
    return p


def run(command: str, config: CipherConfig) -> int:
    """Run one encode/decode described by `config`. Returns the character count."""
    cipher = get_cipher_from_name(config.cipher_name)
    if cipher is None:
        raise CipherError(f"Cipher '{config.cipher_name}' is not a valid Cipher")

    cipher.set_key(config.resolve_key())
    logger.debug("Using %s cipher", cipher.name)

    try:
        with open_input(config.input_file) as reader:
            with open_output(config.output_file) as writer:
                op = cipher.encode if command == "encode" else cipher.decode
                count = op(reader, writer)
    except OSError as e:
        raise CipherError(f"Unable to open file: {e}") from e

    logger.debug("%sd %d characters", command.capitalize(), count)
    return count


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "list":
        for name in available_ciphers():
            print(name)
        return 0

    config = CipherConfig.from_args(args)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        run(args.command, config)
    except CipherError as e:
        logger.error("Error %sing message: %s", args.command[:-1], e)
        return 1
    return 0


def entry_point():
    sys.exit(main())
