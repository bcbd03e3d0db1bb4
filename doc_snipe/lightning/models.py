"""Lightning data models. Every struct that flows through the proximity pipeline."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pattern:
    """A compiled matcher plus the term it came from. Identity is the term."""

    term: str
    regex: re.Pattern = field(compare=False, repr=False)


@dataclass(frozen=True)
class Occurrence:
    """One line where a pattern matches (1-indexed)."""

    line: int
    pattern: Pattern


@dataclass
class OccurrenceIndex:
    """Pattern -> ascending line numbers, for one document's text."""

    lines: dict[Pattern, list[int]]
    total_lines: int
    short_circuited: bool = False

    def count(self, pattern: Pattern) -> int:
        return len(self.lines.get(pattern, []))

    @property
    def present(self) -> list[Pattern]:
        """Patterns with at least one recorded occurrence."""
        return [p for p, found in self.lines.items() if found]


@dataclass(frozen=True)
class ProximityMatch:
    """Two occurrences of different patterns within the allowed distance."""

    first: Occurrence
    second: Occurrence

    @property
    def distance(self) -> int:
        return self.second.line - self.first.line

    @property
    def min_line(self) -> int:
        return min(self.first.line, self.second.line)

    @property
    def max_line(self) -> int:
        return max(self.first.line, self.second.line)


@dataclass(frozen=True)
class ContextWindow:
    """Inclusive 1-indexed line range rendered around a match."""

    start: int
    end: int

    @classmethod
    def around(
        cls, first_line: int, last_line: int, total_lines: int, margin: int = 2
    ) -> "ContextWindow":
        start = max(1, min(first_line, last_line) - margin)
        end = min(total_lines, max(first_line, last_line) + margin)
        return cls(start=start, end=end)


@dataclass
class SearchResult:
    """Outcome of evaluating one document's text."""

    matched: bool
    rendered: str = ""
    proximity: ProximityMatch | None = None
    windows: list[ContextWindow] = field(default_factory=list)

    @classmethod
    def miss(cls) -> "SearchResult":
        return cls(matched=False)


@dataclass
class DocumentHit:
    """A document and what the search made of it."""

    document_id: str
    result: SearchResult
    extracted: bool = True

    @property
    def matched(self) -> bool:
        return self.result.matched


@dataclass
class RunSummary:
    """Counters for a whole run. Updated as each document is emitted."""

    root: str = ""
    terms: list[str] = field(default_factory=list)
    doc_files: int = 0
    docx_files: int = 0
    documents_searched: int = 0
    documents_matched: int = 0
    extraction_failures: int = 0
    search_time_ms: float = 0.0

    @property
    def total_files(self) -> int:
        return self.doc_files + self.docx_files

    def record(self, hit: DocumentHit) -> None:
        self.documents_searched += 1
        if not hit.extracted:
            self.extraction_failures += 1
        if hit.matched:
            self.documents_matched += 1
