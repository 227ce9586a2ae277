"""
Resolve raw command-line arguments into a SearchConfig.

    minigrep <query> <filename> [flags...]

Flags (only entries after the file name are treated as flags):

    -S   search case-insensitively
    -s   search case-sensitively
    -v   print progress to stderr

Case sensitivity, highest precedence first:

  1. an explicit -S or -s flag (both together is an error)
  2. the CASE_INSENSITIVE environment variable: set to anything, even an
     empty string, means case-insensitive
  3. case-sensitive

Unknown flags are ignored.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Sequence

from minigrep.errors import ConflictingFlags, InsufficientArguments

CASE_INSENSITIVE_ENV = "CASE_INSENSITIVE"

FLAG_INSENSITIVE = "-S"
FLAG_SENSITIVE   = "-s"
FLAG_VERBOSE     = "-v"


@dataclass(frozen=True)
class SearchConfig:
    query:          str
    filename:       str
    case_sensitive: bool = True
    verbose:        bool = False

    @classmethod
    def from_args(
        cls,
        args: Sequence[str],
        env: "Mapping[str, str] | None" = None,
    ) -> "SearchConfig":
        """
        Build a config from `args` (program name at index 0).

        `env` is a snapshot of the process environment.  When omitted,
        os.environ is consulted once.  Raises InsufficientArguments when
        the query or file name is missing, ConflictingFlags for -s with -S.
        """
        if len(args) < 3:
            raise InsufficientArguments()

        query    = str(args[1])
        filename = str(args[2])
        flags    = set(args[3:])

        case_sensitive = _resolve_case_sensitive(
            flags, os.environ if env is None else env
        )
        return cls(
            query=query,
            filename=filename,
            case_sensitive=case_sensitive,
            verbose=FLAG_VERBOSE in flags,
        )

    @property
    def mode(self) -> str:
        return "case-sensitive" if self.case_sensitive else "case-insensitive"


def _resolve_case_sensitive(flags: set, env: Mapping[str, str]) -> bool:
    insensitive = FLAG_INSENSITIVE in flags
    sensitive   = FLAG_SENSITIVE in flags

    if insensitive and sensitive:
        raise ConflictingFlags()
    if insensitive:
        return False
    if sensitive:
        return True
    return CASE_INSENSITIVE_ENV not in env
