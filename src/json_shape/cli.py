"""
Command-line interface for json-shape.

Reads one or more JSON files, aggregates them into one schema tree and
writes the rendering to stdout or to the file given with ``--output``.
Diagnostics go to stderr; stdout only ever carries the rendering.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from json_shape import __version__
from json_shape.api import render, summarize_files
from json_shape.config import AggregatorConfig, KindConflictPolicy, RenderConfig
from json_shape.errors import InputError, KindConflictError

console = Console(stderr=True)

_log = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("json_shape")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=console, show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-shape",
        description="Summarize the structure of JSON documents with occurrence counts",
    )
    parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="JSON files to summarize; several files build one cumulative schema",
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the summary to this file instead of stdout",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Spaces per nesting level (default: 2)",
    )
    parser.add_argument(
        "--counts",
        action="store_true",
        help="Also print occurrence counts on object and array lines",
    )
    parser.add_argument(
        "--on-kind-conflict",
        choices=[policy.value for policy in KindConflictPolicy],
        default=KindConflictPolicy.ERROR.value,
        help="What to do when a key is seen with different kinds (default: error)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Do not descend below this depth",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments without the program name. Defaults to
            ``sys.argv[1:]``.

    Returns:
        0 on success, 1 on any input, aggregation or output failure, 130 when
        interrupted.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        aggregator_config = AggregatorConfig(
            on_kind_conflict=KindConflictPolicy(args.on_kind_conflict),
            max_depth=args.max_depth,
        )
        render_config = RenderConfig(
            indent=args.indent,
            show_container_counts=args.counts,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        _log.info("summarizing %d file(s)", len(args.files))
        root = summarize_files(args.files, config=aggregator_config)
        text = render(root, fmt=args.format, config=render_config)
        if args.output:
            Path(args.output).write_text(text, encoding="utf-8")
            _log.info("wrote summary to %s", args.output)
        else:
            sys.stdout.write(text)
    except (InputError, KindConflictError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]", soft_wrap=True)
        return 1
    except OSError as e:
        target = args.output if args.output else "standard output"
        console.print(
            f"[bold red]Error: cannot write {escape(target)}: "
            f"{escape(e.strerror or str(e))}[/bold red]",
            soft_wrap=True,
        )
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 130

    return 0
