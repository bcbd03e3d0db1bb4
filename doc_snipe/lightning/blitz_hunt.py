"""
blitz_hunt.py - The core. Fast in, fast out.

Hound class with search_text(), find_documents(), hunt().
Single-term mode reports every match window; multi-term mode reports the
first pair of different terms within line_count lines of each other.
Extraction runs on a ThreadPoolExecutor, results come back in document order.
"""

import logging
import os
import time
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from .context_strike import (
    HIGHLIGHT_END,
    HIGHLIGHT_START,
    extract,
    render_windows,
    single_term_windows,
)
from .doc_siphon import DOC_EXTENSIONS, DOCUMENT_EXTENSIONS, extract_text
from .line_blast import build_index, split_lines
from .models import DocumentHit, RunSummary, SearchResult
from .pattern_splinter import ConfigError, compile_terms
from .proximity_arc import find_match

logger = logging.getLogger(__name__)

DEFAULT_LINE_COUNT = 5
DEFAULT_WORKERS = 4

IGNORE_DIRS = {
    ".git", "__pycache__", ".venv", "venv", "node_modules", ".Trash", "$RECYCLE.BIN",
}


@dataclass(frozen=True)
class SearchConfig:
    """Per-run parameters. One term is single mode, two or more is multi mode."""

    terms: list[str] = field(default_factory=list)
    line_count: int | None = None
    regex: bool = False
    color: bool = True
    workers: int = 1

    @property
    def mode(self) -> str:
        return "single" if len(set(self.terms)) == 1 else "multi"

    def validate(self) -> None:
        if not self.terms:
            raise ConfigError("At least one search term is required")
        if self.workers < 1:
            raise ConfigError(f"workers must be >= 1, got {self.workers}")
        if self.mode == "multi":
            if self.regex:
                raise ConfigError("Raw regex is only supported with a single term")
            line_count = DEFAULT_LINE_COUNT if self.line_count is None else self.line_count
            if line_count < 1:
                raise ConfigError(f"line count must be >= 1, got {line_count}")


class Hound:
    """
    Proximity search over extracted document text.

        Hound(SearchConfig(["dharma"])).search_text(text)
        Hound(SearchConfig(["dharma", "yoga"], line_count=3)).hunt("corpus/")
    """

    def __init__(self, config: SearchConfig):
        config.validate()
        self.config = config
        self.patterns = compile_terms(config.terms, regex=config.regex)
        self.line_count = (
            DEFAULT_LINE_COUNT if config.line_count is None else config.line_count
        )
        if config.color:
            self.markers = {"start": HIGHLIGHT_START, "end": HIGHLIGHT_END}
        else:
            self.markers = {"start": "", "end": ""}
        self.summary = RunSummary(terms=list(config.terms))

    @property
    def mode(self) -> str:
        return self.config.mode

    # ── Per-document evaluation ──────────────────────────────────────

    def _search_single(self, text: str) -> SearchResult:
        lines = split_lines(text)
        windows = single_term_windows(lines, self.patterns[0])
        if not windows:
            return SearchResult.miss()
        return SearchResult(
            matched=True,
            rendered=render_windows(lines, windows, self.patterns, **self.markers),
            windows=windows,
        )

    def _search_multi(self, text: str) -> SearchResult:
        index = build_index(text, self.patterns)
        match = find_match(index, self.line_count)
        if match is None:
            return SearchResult.miss()
        lines = split_lines(text)
        return SearchResult(
            matched=True,
            rendered=extract(lines, match, self.patterns, **self.markers),
            proximity=match,
        )

    def search_text(self, text: str | None) -> SearchResult:
        """Evaluate one document's text. Empty text is a miss, never an error."""
        if not text:
            return SearchResult.miss()
        if self.mode == "single":
            return self._search_single(text)
        return self._search_multi(text)

    def search_document(self, document_id: str, text: str | None) -> DocumentHit:
        """text=None means extraction failed."""
        return DocumentHit(
            document_id=document_id,
            result=self.search_text(text),
            extracted=text is not None,
        )

    # ── Discovery + run ──────────────────────────────────────────────

    def find_documents(self, root: str | Path) -> list[Path]:
        """All .doc/.docx under root, in sorted walk order."""
        root_path = Path(root)
        documents = []
        for dirpath, dirnames, filenames in os.walk(root_path):
            # Prune in-place so os.walk won't descend
            dirnames[:] = sorted(d for d in dirnames if d not in IGNORE_DIRS)
            for filename in sorted(filenames):
                if filename.startswith("~$"):
                    continue  # Word lock file
                path = Path(dirpath) / filename
                if path.suffix.lower() in DOCUMENT_EXTENSIONS:
                    documents.append(path)
        return documents

    def _process_file(self, path: Path) -> DocumentHit:
        logger.debug(f"Processing: {path}")
        return self.search_document(str(path), extract_text(path))

    def hunt(self, root: str | Path) -> Iterator[DocumentHit]:
        """
        Search every document under root, yielding hits in document order.

        self.summary is updated before each yield, so documents_matched always
        equals the matched documents emitted so far.
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise ConfigError(f"Directory '{root}' does not exist.")

        start = time.perf_counter()
        documents = self.find_documents(root_path)
        doc_files = sum(1 for d in documents if d.suffix.lower() in DOC_EXTENSIONS)
        self.summary = RunSummary(
            root=str(root),
            terms=list(self.config.terms),
            doc_files=doc_files,
            docx_files=len(documents) - doc_files,
        )
        logger.info(
            f"Found {doc_files} .doc and {len(documents) - doc_files} .docx files in {root}"
        )

        workers = min(self.config.workers, len(documents) or 1)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order: one aggregation point
            for hit in executor.map(self._process_file, documents):
                self.summary.record(hit)
                self.summary.search_time_ms = (time.perf_counter() - start) * 1000
                yield hit

        logger.info(
            f"Searched {self.summary.documents_searched} documents, "
            f"{self.summary.documents_matched} matched in {self.summary.search_time_ms:.0f}ms"
        )
