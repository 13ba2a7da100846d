"""Interactive front-end: banner, read-eval-print loop and exit codes.

There is deliberately no quit command; the loop ends on end-of-input or on
Ctrl-C.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from . import __version__
from .processor import CommandProcessor

__all__ = ["BANNER", "main", "repl"]

logger = logging.getLogger(__name__)

BANNER = (
    "This is a simple transactional key-value store written in Python.",
    "Enter h (help) for a list of commands",
    "Ctrl-c to exit",
)

EXIT_OK = 0
EXIT_INTERRUPTED = 130


def repl(processor: CommandProcessor, stdin: TextIO, stdout: TextIO) -> int:
    """Feed every line of *stdin* to *processor* until EOF or interrupt."""
    try:
        for line in stdin:
            for out in processor.execute(line):
                stdout.write(out + "\n")
            stdout.flush()
    except KeyboardInterrupt:
        logger.debug("interrupted at depth=%d", processor.stack.depth)
        return EXIT_INTERRUPTED
    logger.debug("end of input at depth=%d", processor.stack.depth)
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="txkv",
        description="Interactive in-memory key-value store with nested transactions.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics written to stderr",
    )
    parser.add_argument("--no-banner", action="store_true", help="Do not print the startup banner")
    parser.add_argument(
        "--strict-delete",
        action="store_true",
        help="Let DELETE remove keys holding an empty value",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = _build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    # stdout carries the command protocol only.
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.no_banner:
        stdout.write("\n".join(BANNER) + "\n")
        stdout.flush()

    processor = CommandProcessor(strict_delete=args.strict_delete)
    return repl(processor, stdin, stdout)


if __name__ == "__main__":
    sys.exit(main())
