"""Command-line front door for folderwalk.

Parses CLI options, resolves the target directory, and opens the sink.
Then hands off to the tree renderer and reports fatal errors.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from . import config
from .diagnostics import warnings_to_stderr
from .output import OUTPUT_FILENAME, open_sink
from .render import RenderConfig, glyphs_for, write_tree


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; defaults come from the persisted config.

    Every stored default can be overridden: ``--no-ascii`` and
    ``--no-content`` switch features back off and ``--no-max-depth`` removes
    a stored depth ceiling.
    """
    defaults = config.load_defaults()
    parser = argparse.ArgumentParser(
        prog="folderwalk",
        description="Write a directory tree, optionally with file contents.",
        epilog=f"Output: {OUTPUT_FILENAME} is created in the target directory unless --stdout is used.",
        allow_abbrev=False,
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to scan (default: current directory).")
    depth = parser.add_mutually_exclusive_group()
    depth.add_argument(
        "--max-depth",
        type=_nonnegative_int,
        default=defaults.max_depth,
        metavar="N",
        help="Limit recursion depth.",
    )
    depth.add_argument(
        "--no-max-depth",
        dest="max_depth",
        action="store_const",
        const=None,
        help="Recurse without a depth limit, ignoring any stored default.",
    )
    parser.add_argument(
        "--ascii",
        action=argparse.BooleanOptionalAction,
        default=defaults.ascii_only,
        help="Use ASCII tree characters instead of Unicode.",
    )
    parser.add_argument(
        "-c",
        "--content",
        dest="show_content",
        action=argparse.BooleanOptionalAction,
        default=defaults.show_content,
        help="Include file contents.",
    )
    parser.add_argument(
        "-o",
        "--stdout",
        dest="to_stdout",
        action="store_true",
        help=f"Output to stdout instead of {OUTPUT_FILENAME}.",
    )
    return parser


def run(
    root: Path,
    max_depth: int | None = None,
    ascii_only: bool = False,
    show_content: bool = False,
    to_stdout: bool = False,
) -> None:
    """Render the tree under ``root`` into the selected sink.

    Raises ``OSError`` when ``root`` is missing, inaccessible, not a
    directory, or when the output file cannot be created.
    """
    root.stat()
    if not root.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {root}")

    with open_sink(root, to_stdout) as (sink, self_path):
        render_config = RenderConfig(
            glyphs=glyphs_for(ascii_only),
            show_content=show_content,
            self_path=self_path,
        )
        write_tree(root, sink, render_config, max_depth=max_depth)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and write the tree for the chosen directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Argument errors exit with status 2 via ``argparse``;
    run failures exit with status 1 and a ``Failed:`` message.
    """
    args = build_parser().parse_args()

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.path) if args.path is not None else default_path

    try:
        with warnings_to_stderr():
            run(
                root,
                max_depth=args.max_depth,
                ascii_only=args.ascii,
                show_content=args.show_content,
                to_stdout=args.to_stdout,
            )
    except OSError as exc:
        raise SystemExit(f"Failed: {exc}") from exc


if __name__ == "__main__":
    main()
