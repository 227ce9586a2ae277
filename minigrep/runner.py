"""
Run a search: read the file, scan it, print the matches.

The file is read completely before anything is printed, so a read failure
never leaves partial output behind.
"""
from __future__ import annotations

import sys
from typing import TextIO

from minigrep.config import SearchConfig
from minigrep.errors import IoFailure, OutputFailure
from minigrep.search import search_lines


def read_content(filename: str) -> str:
    """
    Return the whole file as text.

    Decoded as UTF-8 with newline translation off, so "\r" characters reach
    the line splitter untouched.  Raises IoFailure carrying the OS or decode
    error message.
    """
    try:
        with open(filename, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IoFailure(str(e)) from e


def run(
    config: SearchConfig,
    out: "TextIO | None" = None,
    err: "TextIO | None" = None,
) -> list[str]:
    """
    Search `config.filename` for `config.query` and print each match to `out`.

    Returns the matching lines.  Raises IoFailure if the file cannot be read
    and OutputFailure if `out` cannot be written.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    if config.verbose:
        print(f"[minigrep] searching {config.filename} for {config.query!r} "
              f"({config.mode})", file=err)

    contents = read_content(config.filename)
    results  = search_lines(config.query, contents, config.case_sensitive)

    try:
        for line in results:
            print(line, file=out)
        out.flush()
    except (OSError, UnicodeEncodeError) as e:
        raise OutputFailure(str(e)) from e

    if config.verbose:
        noun = "line" if len(results) == 1 else "lines"
        print(f"[minigrep] {len(results)} matching {noun}", file=err)

    return results
