#!/usr/bin/env python3
"""
svelte-outline CLI

Thin wrapper over the outline engine.
"""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path

from svelte_outline.orchestrator import outline_path, outline_revision
from svelte_outline.presentation import build_rows, render_json, render_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svelte-outline",
        description="List arrow-function bindings in Svelte component scripts.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  svelte-outline outline src/App.svelte
  svelte-outline outline src/ --format json
  svelte-outline outline src/App.svelte --rev HEAD~1
        """,
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        metavar="{outline}",
    )

    outline_parser = subparsers.add_parser(
        "outline",
        help="Outline a component file or every component under a directory",
    )
    outline_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Component file or directory (default: current directory)",
    )
    outline_parser.add_argument(
        "--rev",
        default=None,
        help="Read documents from this Git revision instead of the work tree",
    )
    outline_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    outline_parser.add_argument(
        "--debug",
        action="store_true",
        help="Print a traceback on internal errors",
    )

    return parser


def _print_text(outlines) -> None:
    print(f"Documents analyzed: {len(outlines)}")
    print()

    for path, detections in outlines.items():
        print(f"{path}")
        print(render_text(build_rows(detections)))
        print()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "outline":
        target = Path(args.path)

        if args.rev is None and not target.exists():
            print(f"Error: Path does not exist: {target.resolve()}", file=sys.stderr)
            return 1

        try:
            if args.rev is None:
                outlines = outline_path(target)
            else:
                outlines = outline_revision(target, rev=args.rev)
        except (ValueError, RuntimeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except Exception:
            print("Internal error while outlining.", file=sys.stderr)
            if args.debug:
                traceback.print_exc()
            else:
                print("Run with --debug for details.", file=sys.stderr)
            return 2

        if args.format == "json":
            print(render_json(outlines))
        else:
            _print_text(outlines)

        return 0

    # This should never happen because argparse enforces commands
    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
