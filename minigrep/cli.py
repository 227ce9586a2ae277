"""
minigrep CLI

    minigrep <query> <filename> [flags...]

    minigrep duct poem.txt            # case-sensitive
    minigrep rUsT poem.txt -S         # case-insensitive
    CASE_INSENSITIVE=1 minigrep rust poem.txt
    minigrep rust poem.txt -s -v      # force case-sensitive, log to stderr

Matching lines go to stdout.  Errors go to stderr and exit with status 1.
"""

import os
import sys

from minigrep import __version__
from minigrep.config import SearchConfig
from minigrep.errors import ConfigError, RunError
from minigrep.runner import run

USAGE = """\
usage: minigrep <query> <filename> [-S | -s] [-v]

Print every line of <filename> that contains <query>.

flags (after the file name):
  -S   case-insensitive search
  -s   case-sensitive search (overrides CASE_INSENSITIVE)
  -v   print progress to stderr

environment:
  CASE_INSENSITIVE   when set (to any value), search case-insensitively
                     unless -s is given
"""


def cmd_search(argv: list, env: dict) -> int:
    """Resolve arguments, run the search, and map failures to exit code 1."""
    try:
        config = SearchConfig.from_args(argv, env)
    except ConfigError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    try:
        run(config)
    except RunError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv=None):
    argv = list(sys.argv if argv is None else argv)

    if len(argv) == 2 and argv[1] in ("-h", "--help"):
        print(USAGE, end="")
        sys.exit(0)
    if len(argv) == 2 and argv[1] == "--version":
        print(f"minigrep {__version__}")
        sys.exit(0)

    sys.exit(cmd_search(argv, dict(os.environ)))


if __name__ == "__main__":
    main()
