#!/usr/bin/env python3
"""
get-private-key command line

Prints the resolved private key.
Usage:
  get-private-key                          # Resolve from env / working directory
  get-private-key --filepath app.pem       # Read a specific file
  get-private-key --output escaped         # One line with \\n escapes, for .env files
  get-private-key --output base64          # Base64, for CI secret stores
"""

import argparse
import base64
import logging
import sys
from typing import List, Optional

from get_private_key.version import __version__
from get_private_key.core.config import ResolverConfig
from get_private_key.core.errors import PrivateKeyError
from get_private_key.core.resolver import KeyResolver

logger = logging.getLogger("get_private_key")

OUTPUT_FORMATS = ("pem", "escaped", "base64")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def format_key(pem: str, output: str) -> str:
    """Render PEM text in one of OUTPUT_FORMATS."""
    if output == "escaped":
        return pem.replace("\n", "\\n")
    if output == "base64":
        return base64.b64encode(pem.encode("utf-8")).decode("ascii")
    return pem


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="get-private-key",
        description="Find a private key from a file, PRIVATE_KEY / PRIVATE_KEY_PATH, "
                    "or a single *.pem file in the working directory",
    )
    parser.add_argument("--filepath", help="Read the key from this file")
    parser.add_argument("--cwd", help="Working directory for relative paths and *.pem lookup")
    parser.add_argument("--output", choices=OUTPUT_FORMATS, default="pem",
                        help="Output format (default: pem)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every resolution step")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')

    config = ResolverConfig.from_options(filepath=args.filepath, cwd=args.cwd)

    try:
        resolved = KeyResolver(config).resolve_source()
    except PrivateKeyError as e:
        logger.error(f"{e.code}: {e}")
        return EXIT_ERROR
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read private key: {e}")
        return EXIT_ERROR

    if resolved is None:
        logger.error("No private key found")
        return EXIT_NOT_FOUND

    logger.info(f"Private key source: {resolved.source}")
    sys.stdout.write(format_key(resolved.pem, args.output))
    if not resolved.pem.endswith("\n") or args.output != "pem":
        sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
