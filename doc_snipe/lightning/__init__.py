"""
Lightning - Proximity Search for Word Documents

Single-term and multi-term (proximity) search over text pulled out of
.doc/.docx files. Every module name hits like a bolt.

Usage:
    from doc_snipe.lightning import Hound, SearchConfig

    bolt = Hound(SearchConfig(["dharma", "yoga"], line_count=3))
    result = bolt.search_text(text)          # One document's text
    for hit in bolt.hunt("texts/"):          # A whole tree
        print(hit.document_id, hit.matched)

CLI:
    docsnipe texts/ 'dharma'                 # Every hit, 2 lines of context
    docsnipe texts/ 'dharma*' yoga -n 3      # Terms within 3 lines
"""

from .blitz_hunt import Hound, SearchConfig
from .models import (
    ContextWindow,
    DocumentHit,
    Occurrence,
    OccurrenceIndex,
    Pattern,
    ProximityMatch,
    RunSummary,
    SearchResult,
)
from .pattern_splinter import (
    ConfigError,
    compile_term,
    compile_terms,
    wildcard_to_regex,
)
from .line_blast import (
    split_lines,
    pattern_present,
    scan_lines,
    build_index,
)
from .proximity_arc import (
    flatten,
    find_match,
)
from .context_strike import (
    extract,
    highlight_line,
    strip_marks,
    single_term_windows,
    render_windows,
)
from .doc_siphon import extract_text

__all__ = [
    "Hound",
    "SearchConfig",
    "ConfigError",
    "ContextWindow",
    "DocumentHit",
    "Occurrence",
    "OccurrenceIndex",
    "Pattern",
    "ProximityMatch",
    "RunSummary",
    "SearchResult",
    "compile_term",
    "compile_terms",
    "wildcard_to_regex",
    "split_lines",
    "pattern_present",
    "scan_lines",
    "build_index",
    "flatten",
    "find_match",
    "extract",
    "highlight_line",
    "strip_marks",
    "single_term_windows",
    "render_windows",
    "extract_text",
]
