"""
line_blast.py - Line splitting + occurrence indexing. Blasts through text line by line.

Records, per pattern, every line where it matches. A whole-text existence
check runs first so absent patterns are never line-scanned.
"""

import logging

from .models import OccurrenceIndex, Pattern

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split on newline. No synthetic empty line after a final newline."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def pattern_present(text: str, pattern: Pattern) -> bool:
    """Cheap pre-check: does the pattern match anywhere in the text?"""
    return pattern.regex.search(text) is not None


def scan_lines(lines: list[str], pattern: Pattern) -> list[int]:
    """1-indexed numbers of the lines the pattern matches, ascending."""
    return [i for i, line in enumerate(lines, start=1) if pattern.regex.search(line)]


def build_index(
    text: str,
    patterns: list[Pattern],
    *,
    min_present: int = 2,
) -> OccurrenceIndex:
    """
    Index occurrences of every pattern in text.

    Patterns that fail the existence check get an empty list without a
    line scan. When fewer than min_present patterns exist anywhere in the
    text, nothing is scanned and the index comes back short-circuited.
    """
    lines = split_lines(text)
    present = [p for p in patterns if pattern_present(text, p)]

    if len(present) < min_present:
        logger.debug(
            f"Pre-check: {len(present)}/{len(patterns)} patterns present, skipping scan"
        )
        return OccurrenceIndex(
            lines={p: [] for p in patterns},
            total_lines=len(lines),
            short_circuited=True,
        )

    found = set(present)
    index = {}
    for pattern in patterns:
        index[pattern] = scan_lines(lines, pattern) if pattern in found else []

    return OccurrenceIndex(lines=index, total_lines=len(lines))
