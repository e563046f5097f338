"""Command line entry point for verifying binaries against Rekor."""

import argparse
import sys
from typing import Optional, Sequence

from .log import get_logger
from .rekor_client import RekorError
from .utils import PathError
from .verifier import UnsupportedKeyError, verify_file, verify_sha
from .version import build_version


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="rekor-verifier",
        description=(
            "rekor-verifier automates certificates verification for binary "
            "signatures stored in Rekor"
        ),
    )
    parser.add_argument("-v", "--version", action="version", version=build_version())
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("-p", "--path", default="", help="path to the binary")
    target.add_argument("-s", "--sha", default="", help="shasum of the binary")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the verifier; return 0 on success and 1 on failure."""
    logger = get_logger()
    logger.info("Starting")
    args = build_parser().parse_args(argv)
    try:
        if args.path:
            result = verify_file(args.path)
        elif args.sha:
            result = verify_sha(args.sha)
        else:
            result = False
    except (PathError, RekorError, UnsupportedKeyError, OSError, ValueError) as err:
        logger.error("Oops. An error while executing rekor-verifier '%s'", err)
        return 1
    if not result:
        logger.info("Verification unsuccessful")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())