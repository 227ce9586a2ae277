"""
minigrep.search — line-by-line substring matching.

Lines are split on "\n" only (a trailing "\r" is dropped, so CRLF files work).
A terminator at the very end of the content does not produce an empty line.
Every returned string is an exact slice of the content with its original
casing; the case-insensitive variant lowercases copies for comparison only.
"""
from __future__ import annotations

from typing import Iterator


def lines(content: str) -> Iterator[str]:
    """Yield the lines of `content` without their terminators."""
    start = 0
    end = len(content)
    while start < end:
        nl = content.find("\n", start)
        if nl == -1:
            nl = end
        line = content[start:nl]
        if line.endswith("\r"):
            line = line[:-1]
        yield line
        start = nl + 1


def search(query: str, content: str) -> list[str]:
    """Return the lines of `content` that contain `query` exactly."""
    return [line for line in lines(content) if query in line]


def search_case_insensitive(query: str, content: str) -> list[str]:
    """Return the lines of `content` that contain `query`, ignoring case."""
    query = query.lower()
    return [line for line in lines(content) if query in line.lower()]


def search_lines(query: str, content: str, case_sensitive: bool = True) -> list[str]:
    if case_sensitive:
        return search(query, content)
    return search_case_insensitive(query, content)
