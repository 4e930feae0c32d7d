"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .args import HelpRequested, UsageError, VersionRequested, help_text, parse_args
from .generator import generate
from .params import BANNER


def main(argv: Sequence[str] | None = None) -> int:
    """Parse options, generate the image and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        params = parse_args(argv)
    except HelpRequested:
        print(help_text())
        return 0
    except VersionRequested:
        print(BANNER)
        return 0
    except UsageError as error:
        print(f"{error}\n", file=sys.stderr)
        print(help_text())
        return 1
    try:
        generate(params)
    except OSError as error:
        print(f"cannot write '{params.file_path}': {error.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())