"""
context_strike.py - Context windows and highlighting.

Strikes a 2-line margin around matches, marks every matching span, and
merges neighbouring single-term windows the way grep -C merges its groups.
"""

from .models import ContextWindow, Pattern, ProximityMatch

CONTEXT_MARGIN = 2

# Same escapes grep --color=always emits
HIGHLIGHT_START = "\x1b[01;31m\x1b[K"
HIGHLIGHT_END = "\x1b[m\x1b[K"
WINDOW_SEPARATOR = "--"


def match_spans(line: str, patterns: list[Pattern]) -> list[tuple[int, int]]:
    """Character spans hit by any pattern, merged where they overlap or touch."""
    spans = sorted(
        (m.start(), m.end())
        for pattern in patterns
        for m in pattern.regex.finditer(line)
        if m.end() > m.start()
    )
    merged: list[tuple[int, int]] = []
    for start, end in spans:
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def highlight_line(
    line: str,
    patterns: list[Pattern],
    *,
    start: str = HIGHLIGHT_START,
    end: str = HIGHLIGHT_END,
) -> str:
    """Wrap every matched span in markers. Text content is left untouched."""
    if not start and not end:
        return line
    parts = []
    pos = 0
    for span_start, span_end in match_spans(line, patterns):
        parts.append(line[pos:span_start])
        parts.append(f"{start}{line[span_start:span_end]}{end}")
        pos = span_end
    parts.append(line[pos:])
    return "".join(parts)


def strip_marks(
    text: str,
    *,
    start: str = HIGHLIGHT_START,
    end: str = HIGHLIGHT_END,
) -> str:
    """Remove highlight markers, recovering the original text."""
    for marker in (start, end):
        if marker:
            text = text.replace(marker, "")
    return text


def render_window(
    lines: list[str],
    window: ContextWindow,
    patterns: list[Pattern],
    **markers: str,
) -> str:
    """Highlighted lines of one window, newline-joined, in original order."""
    return "\n".join(
        highlight_line(lines[i - 1], patterns, **markers)
        for i in range(window.start, window.end + 1)
    )


def extract(
    lines: list[str],
    match: ProximityMatch,
    patterns: list[Pattern],
    **markers: str,
) -> str:
    """Render the context window around a proximity match."""
    window = ContextWindow.around(
        match.min_line, match.max_line, len(lines), margin=CONTEXT_MARGIN
    )
    return render_window(lines, window, patterns, **markers)


def single_term_windows(lines: list[str], pattern: Pattern) -> list[ContextWindow]:
    """
    One window per matching line, margin on each side.

    Windows that overlap or sit back to back are merged into one group.
    """
    windows: list[ContextWindow] = []
    for i, line in enumerate(lines, start=1):
        if not pattern.regex.search(line):
            continue
        window = ContextWindow.around(i, i, len(lines), margin=CONTEXT_MARGIN)
        if windows and window.start <= windows[-1].end + 1:
            windows[-1] = ContextWindow(windows[-1].start, max(windows[-1].end, window.end))
        else:
            windows.append(window)
    return windows


def render_windows(
    lines: list[str],
    windows: list[ContextWindow],
    patterns: list[Pattern],
    **markers: str,
) -> str:
    """Every window rendered, groups separated by a '--' line."""
    return f"\n{WINDOW_SEPARATOR}\n".join(
        render_window(lines, w, patterns, **markers) for w in windows
    )
