"""
proximity_arc.py - The arc that jumps between two terms.

Flattens an OccurrenceIndex into line order and finds the first pair of
occurrences from different patterns within line_count lines of each other.
First found wins, not closest.
"""

from .models import Occurrence, OccurrenceIndex, ProximityMatch


def flatten(index: OccurrenceIndex) -> list[Occurrence]:
    """All occurrences sorted by line, ties broken by pattern insertion order."""
    order = {pattern: i for i, pattern in enumerate(index.lines)}
    occurrences = [
        Occurrence(line=line, pattern=pattern)
        for pattern, lines in index.lines.items()
        for line in lines
    ]
    occurrences.sort(key=lambda o: (o.line, order[o.pattern]))
    return occurrences


def find_match(index: OccurrenceIndex, line_count: int) -> ProximityMatch | None:
    """
    Scan pairs (i, j), i < j, in flattened order. Stop at the first pair of
    different patterns with 0 <= distance <= line_count.
    """
    if index.short_circuited or len(index.present) < 2:
        return None

    occurrences = flatten(index)
    for i, first in enumerate(occurrences):
        for second in occurrences[i + 1:]:
            distance = second.line - first.line
            if distance > line_count:
                # Sorted by line: everything after is further away
                break
            if first.pattern != second.pattern and distance >= 0:
                return ProximityMatch(first=first, second=second)
    return None
