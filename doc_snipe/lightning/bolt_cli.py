"""
bolt_cli.py - The bolt that fires when you type docsnipe.

One term: every match with 2 lines of context.
Two or more: documents where different terms land within -n lines.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .pattern_splinter import ConfigError


def _err(msg: str) -> None:
    """Print *msg* to stderr."""
    print(msg, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """docsnipe CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="docsnipe",
        description="Search .doc/.docx trees for a term, or for terms near each other",
        epilog="Examples:\n"
        "  docsnipe texts/ 'dharma'               # Every hit, 2 lines of context\n"
        "  docsnipe texts/ 'dharma*'              # Wildcard: one word\n"
        "  docsnipe texts/ dharma yoga -n 3       # Both within 3 lines\n"
        "  docsnipe texts/ 'dharm(a|as)' -r       # Raw regex, single term only\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("directory", help="Directory to search")
    parser.add_argument("terms", nargs="+", help="Search term(s)")
    parser.add_argument(
        "-n", "--lines", type=int, default=None, metavar="N",
        help="Max line distance between terms (multi-term mode, default 5)",
    )
    parser.add_argument("-r", "--regex", action="store_true", help="Raw regex mode")
    parser.add_argument("--no-color", action="store_true", help="No highlight escapes")
    parser.add_argument("-j", "--workers", type=int, default=None, help="Extraction threads")
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("-q", "--quiet", action="store_true", help="No progress on stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    from .blitz_hunt import DEFAULT_LINE_COUNT, DEFAULT_WORKERS, Hound, SearchConfig
    from .formatters import (
        format_header,
        format_hit,
        format_inventory,
        format_summary,
        to_json,
    )

    if len(set(args.terms)) == 1 and args.lines is not None:
        parser.error("-n/--lines needs two or more distinct terms")

    config = SearchConfig(
        terms=args.terms,
        line_count=args.lines,
        regex=args.regex,
        color=not args.no_color and not args.json,
        workers=DEFAULT_WORKERS if args.workers is None else args.workers,
    )
    try:
        bolt = Hound(config)
    except ConfigError as e:
        parser.error(str(e))

    if not Path(args.directory).is_dir():
        print(f"Error: Directory '{args.directory}' does not exist.")
        return 1

    line_count = args.lines if args.lines is not None else DEFAULT_LINE_COUNT
    if not args.json:
        print(format_header(args.directory, args.terms, line_count))

    hits = []
    started = False
    try:
        for hit in bolt.hunt(args.directory):
            if not started:
                started = True
                if not args.json:
                    print(format_inventory(bolt.summary))
            if not args.quiet:
                _err(f"Processing: {hit.document_id}")
            if args.json:
                hits.append(hit)
            elif hit.matched:
                print(format_hit(hit))
    except KeyboardInterrupt:
        _err("\ndocsnipe: interrupted by user")
        return 130

    if args.json:
        payload = to_json(bolt.summary, hits, bolt.markers)
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    if not started:
        print(format_inventory(bolt.summary))
        return 0

    print(format_summary(bolt.summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
