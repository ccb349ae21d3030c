"""
Command line entry point.

    pseudoizer strings.resx strings.ja-JP.resx [/b]
    pseudoizer path/to/project ja-JP [/b]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .convert import convert_directory, convert_file

logger = logging.getLogger("pseudoizer")

BANNER = "Pseudoizer: adapted from MSDN BugSlayer 2004-Apr i18n article."
DESCRIPTION = (
    "Takes an English resource file (resx) and creates an artificial but still "
    "readable Euro-like language to exercise your i18n code without a formal translation."
)
EPILOG = """\
examples:
  pseudoizer strings.en.resx strings.ja-JP.resx
  pseudoizer . ja-JP /b
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="pseudoizer",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", help="input .resx file, or a directory to walk recursively")
    parser.add_argument("target", help="output .resx file, or a language code in directory mode")
    parser.add_argument("switch", nargs="?", help="/b to include blank resources; anything else is ignored")
    parser.add_argument("-b", "--include-blank", action="store_true", help="include blank resources")
    parser.add_argument("-v", "--verbose", action="store_true", help="log skipped entries")
    return parser


def configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    formatter = logging.Formatter("%(levelname)s: %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    else:
        for existing_handler in root_logger.handlers:
            existing_handler.setFormatter(formatter)


def main(argv: Optional[List[str]] = None) -> int:
    print(BANNER)
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    include_blank = args.include_blank or args.switch == "/b"
    source = Path(args.source)

    try:
        if source.is_dir():
            written = convert_directory(source, args.target, include_blank)
            logger.debug("Wrote %d file(s)", len(written))
        else:
            convert_file(source, args.target, include_blank)
    except Exception:
        logger.exception("Pseudo-localization of %s failed", source)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
