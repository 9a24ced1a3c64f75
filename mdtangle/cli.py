#!/usr/bin/env python3
"""
mdtangle command-line entry point.

Scans the given markdown documents (or directories of them), then writes
every target file they define below the output directory.
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from .commit import write_outputs
from .config import DEFAULT_ENCODING, DEFAULT_PATTERNS, DIRECTIVE_CHOICES, TangleOptions, is_known_encoding
from .core import render_diagnostic, tangle_documents


def _env_choice(name: str, choices, default: str) -> str:
    return _env_checked(name, lambda raw: raw in choices, default)


def _env_checked(name: str, valid, default: str) -> str:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    if not valid(raw):
        print(f"[mdtangle] Warning: Invalid {name}='{raw}', defaulting to '{default}'", file=sys.stderr)
        return default
    return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtangle",
        description="Extract and assemble code blocks from literate markdown documents.",
    )
    parser.add_argument("documents", nargs="*", help="Markdown documents or directories to tangle")
    parser.add_argument(
        "-o", "--output-dir",
        default=os.environ.get("MDTANGLE_OUTPUT_DIR", "."),
        help="Directory output paths are relative to (default: current directory)",
    )
    parser.add_argument(
        "--default-directive",
        choices=DIRECTIVE_CHOICES,
        default=_env_choice("MDTANGLE_DEFAULT_DIRECTIVE", DIRECTIVE_CHOICES, "none"),
        help="Line directive for languages without one of their own",
    )
    parser.add_argument(
        "--encoding",
        default=_env_checked("MDTANGLE_ENCODING", is_known_encoding, DEFAULT_ENCODING),
        help="Encoding of documents and output files",
    )
    parser.add_argument(
        "--pattern", dest="patterns", action="append", default=None,
        help="Glob for documents found in directories (repeatable, default: *.md)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Report what would be written")
    parser.add_argument("--atomic", action="store_true", help="Write each file via a temp file and rename")
    parser.add_argument("--backup-ext", default=None, help="Keep overwritten files with this extension")
    parser.add_argument(
        "--allow-outside", action="store_true",
        help="Allow output paths that resolve outside the output directory",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[mdtangle] %(levelname)s %(name)s: %(message)s")

    try:
        options = TangleOptions(
            encoding=args.encoding,
            default_directive=args.default_directive,
            patterns=tuple(args.patterns or DEFAULT_PATTERNS),
        )
    except ValueError as e:
        parser.error(str(e))
    trace = logging.getLogger("mdtangle") if args.verbose > 1 else None
    result = tangle_documents(args.documents, options=options, logger=trace)
    for diagnostic in result.diagnostics:
        print(render_diagnostic(diagnostic), file=sys.stderr)

    summary = write_outputs(
        args.output_dir,
        result.outputs,
        atomic=args.atomic,
        dry_run=args.dry_run,
        backup_ext=args.backup_ext,
        confine=not args.allow_outside,
        encoding=options.encoding,
    )
    for path in summary.failed:
        print(f"error: {path}: {summary.errors.get(path, 'unknown error')}", file=sys.stderr)
    if args.dry_run:
        for line in summary.success:
            print(line)

    if summary.attempted and not summary.success:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
