"""
pattern_splinter.py - Splits terms on the wildcard like lightning splits a tree.

Term compiler. Literal terms match verbatim, "*" matches the rest of one word:
"dharma*" hits dharma, dharmas, dharma-kshetra, never "dharma kshetra" whole.
"""

import re

from .models import Pattern

WILDCARD = "*"

# One word: a run of non-whitespace, never crossing a space or line break
WORD_WILDCARD = r"\S*"


class ConfigError(ValueError):
    """Bad search configuration. Raised before any document is scanned."""


def wildcard_to_regex(term: str) -> str:
    """
    Turn a wildcard term into regex source.

    Literal parts are escaped before the wildcard goes in, so the inserted
    syntax is never escaped itself.
    """
    return WORD_WILDCARD.join(re.escape(part) for part in term.split(WILDCARD))


def compile_term(term: str, *, regex: bool = False) -> Pattern:
    """
    Compile one search term into a case-insensitive Pattern.

    Args:
        term: Literal or wildcard term (raw regex if regex=True)
        regex: Treat term as raw regex, no escaping
    """
    if not term:
        raise ConfigError("Search term must not be empty")
    if "\n" in term:
        raise ConfigError(f"Search term must fit on one line: {term!r}")

    if regex:
        source = term
    elif WILDCARD in term:
        source = wildcard_to_regex(term)
    else:
        source = re.escape(term)

    try:
        compiled = re.compile(source, re.IGNORECASE)
    except re.error as e:
        raise ConfigError(f"Invalid pattern {term!r}: {e}") from e

    # A pattern that matches nothing-at-all would hit every line
    if compiled.search(""):
        raise ConfigError(f"Pattern {term!r} matches the empty string")

    return Pattern(term=term, regex=compiled)


def compile_terms(terms: list[str], *, regex: bool = False) -> list[Pattern]:
    """Compile each distinct term once, keeping first-seen order."""
    patterns = []
    seen = set()
    for term in terms:
        if term in seen:
            continue
        seen.add(term)
        patterns.append(compile_term(term, regex=regex))
    return patterns
