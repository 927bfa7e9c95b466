"""Command-line preview of the blocks a Markdown document converts to.

Usage::

    mdblocks notes.md                 # {"blocks": [...], "block_count": n}
    mdblocks --batched notes.md       # {"batches": [...], "batch_count": n, ...}
    cat notes.md | mdblocks -         # read from stdin
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from mdblocks.config import ConverterConfig
from mdblocks.converter.md_to_blocks import format_content, markdown_to_blocks_batched
from mdblocks.observability import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdblocks",
        description="Convert Markdown to block API payloads and print them as JSON.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Markdown file to convert (default: read stdin)",
    )
    parser.add_argument(
        "--batched",
        action="store_true",
        help="Group blocks into append-sized batches",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    parser.add_argument(
        "--normalize-languages",
        action="store_true",
        help="Map code fence tags onto accepted language names",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.  Returns the process exit code."""
    args = build_parser().parse_args(argv)
    get_logger("mdblocks.converter").setLevel(args.log_level)

    try:
        if args.path == "-":
            markdown = sys.stdin.read().removeprefix("\ufeff")
        else:
            markdown = Path(args.path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"mdblocks: cannot read {args.path}: {exc}", file=sys.stderr)
        return 1

    config = ConverterConfig(normalize_code_language=args.normalize_languages)
    if args.batched:
        batches = markdown_to_blocks_batched(markdown, config)
        payload = {
            "batches": batches,
            "batch_count": len(batches),
            "block_count": sum(len(batch) for batch in batches),
        }
    else:
        payload = format_content(markdown, config)

    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0
