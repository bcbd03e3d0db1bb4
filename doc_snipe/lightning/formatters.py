"""
formatters.py - Run transcript + JSON output for Hound results.
"""

from typing import Any

from .context_strike import strip_marks
from .models import DocumentHit, RunSummary

SEPARATOR = "-" * 35


def describe_terms(terms: list[str]) -> str:
    return " ".join(terms)


def format_header(root: str, terms: list[str], line_count: int | None = None) -> str:
    lines = [
        f"Starting search in: {root}",
        f"Searching for: '{describe_terms(terms)}'",
    ]
    if line_count is not None and len(terms) > 1:
        lines.append(f"Within: {line_count} lines")
    lines.append(SEPARATOR)
    return "\n".join(lines)


def format_inventory(summary: RunSummary) -> str:
    """File counts line, or the no-documents message."""
    if summary.total_files == 0:
        return "No .doc or .docx files found in the directory."
    return "\n".join([
        f"Found {summary.doc_files} .doc files and {summary.docx_files} .docx files.",
        "Processing files...",
        SEPARATOR,
    ])


def format_hit(hit: DocumentHit) -> str:
    """Rendered context, then the file line and separator."""
    return "\n".join([hit.result.rendered, f"File: {hit.document_id}", SEPARATOR])


def format_summary(summary: RunSummary) -> str:
    if summary.documents_matched == 0:
        return f"No matches found for '{describe_terms(summary.terms)}'."
    return f"Search complete: Found {summary.documents_matched} matches."


def to_json(
    summary: RunSummary,
    hits: list[DocumentHit],
    markers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """
    JSON-serializable dict. Only matching documents are listed.

    markers: the highlight markers the hits were rendered with, if any.
    """
    matches = []
    for hit in hits:
        if not hit.matched:
            continue
        context = hit.result.rendered
        if markers:
            context = strip_marks(context, **markers)
        entry: dict[str, Any] = {"document": hit.document_id, "context": context}
        proximity = hit.result.proximity
        if proximity is not None:
            entry["pair"] = [
                {"term": proximity.first.pattern.term, "line": proximity.first.line},
                {"term": proximity.second.pattern.term, "line": proximity.second.line},
            ]
            entry["distance"] = proximity.distance
        else:
            entry["windows"] = [[w.start, w.end] for w in hit.result.windows]
        matches.append(entry)

    return {
        "root": summary.root,
        "terms": summary.terms,
        "doc_files": summary.doc_files,
        "docx_files": summary.docx_files,
        "documents_searched": summary.documents_searched,
        "documents_matched": summary.documents_matched,
        "extraction_failures": summary.extraction_failures,
        "search_time_ms": summary.search_time_ms,
        "matches": matches,
    }
