"""
convert.py

Command-line entry point.

Converts a Claude data export (conversations.json) into one Markdown file
per conversation, with artifacts saved next to them:

  python convert.py claude-export.json ./my-conversations

Output:
  ./my-conversations/<title>_<uuid prefix>.md
  ./my-conversations/artifacts/<uuid prefix>/<artifact files>

Exit status is 0 when the export was processed (even if some conversations
failed), 1 when no input was given or the input could not be loaded.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from processors.convert import convert_file
from processors.errors import ExportError
from renderers.markdown import MarkdownConfig
from renderers.markdown.config import UNKNOWN_SENDER_POLICIES

DEFAULT_OUTPUT_DIR = "./conversations"

EXAMPLE = "Example: claude-export-convert claude-export.json ./my-conversations"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claude-export-convert",
        description=(
            "Convert a Claude export conversations.json into Markdown files "
            "(one per conversation) and extract artifacts."
        ),
    )

    # Optional here so a bare invocation can print usage and exit 1.
    parser.add_argument("input", nargs="?", help="Path to the export JSON file")

    parser.add_argument(
        "output",
        nargs="?",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (defaults to {DEFAULT_OUTPUT_DIR})",
    )

    parser.add_argument(
        "--unknown-senders",
        choices=UNKNOWN_SENDER_POLICIES,
        default="drop",
        help="Drop or render messages from senders other than human/assistant",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the script.

    This function:
    - reads command-line arguments
    - runs the conversion pipeline
    - prints a summary
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input is None:
        parser.print_usage()
        print(EXAMPLE)
        raise SystemExit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    input_path = Path(args.input)
    output_dir = Path(args.output)

    # Fail early if the file doesn't exist.
    if not input_path.exists():
        raise SystemExit(f'Error: Input file "{input_path}" not found.')

    try:
        summary = convert_file(
            input_path,
            output_dir,
            markdown_cfg=MarkdownConfig(unknown_senders=args.unknown_senders),
        )
    except ExportError as exc:
        raise SystemExit(f"Error processing export file: {exc}") from exc

    print()
    print("=" * 72)
    print(f"Completed! {summary.line}")
    print("=" * 72)
    print(f"Input:  {input_path}")
    print(f"Files saved to: {summary.output_dir.resolve()}")
    print()


# Standard Python pattern: run main() only if executed as a script.
if __name__ == "__main__":
    main()
