"""Command that prints the operations sorting the integers given as arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import ParseError, parse_arguments
from .sorting import solve

ERROR_MESSAGE = "\033[0;91mError\n\033[0m"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line that sorts the numbers; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write(ERROR_MESSAGE)
        return 1
    operations = solve(values)
    sys.stdout.write("".join(f"{op}\n" for op in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())