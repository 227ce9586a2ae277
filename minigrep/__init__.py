"""
minigrep — print the lines of a file that contain a query string.

Quick start
-----------
  pip install minigrep
  minigrep duct poem.txt
  minigrep rUsT poem.txt -S

Library use
-----------
  from minigrep import search, search_case_insensitive

  search("duct", "Rust:\\nsafe, fast, productive.")
  # ['safe, fast, productive.']
"""

from minigrep.config import SearchConfig
from minigrep.errors import (
    ConfigError,
    ConflictingFlags,
    InsufficientArguments,
    IoFailure,
    MinigrepError,
    OutputFailure,
    RunError,
)
from minigrep.search import search, search_case_insensitive, search_lines

__all__ = [
    "SearchConfig",
    "search",
    "search_case_insensitive",
    "search_lines",
    "MinigrepError",
    "ConfigError",
    "InsufficientArguments",
    "ConflictingFlags",
    "RunError",
    "IoFailure",
    "OutputFailure",
]
__version__ = "0.1.0"
