#!/usr/bin/env python3
"""
clean-slate - a code hygiene tool for JavaScript projects.

Commands:
    scan <directory>    Find hygiene issues and remember them for later
    report              Write a markdown report of the last scan
    comment --inline    Annotate the sources with the last scan's issues
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .commenter import add_inline_comments
from .context import MAX_FUNCTION_LENGTH, MAX_NESTING_LEVEL, AnalysisSettings
from .issues import sort_issues
from .reporter import write_report
from .scanner import scan_directory
from .session import DEFAULT_SESSION_FILE, ScanSession, SessionError, clear_session, load_session

log = logging.getLogger(__name__)

__version__ = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clean-slate",
        description="A code hygiene tool for JavaScript projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  clean-slate scan src
  clean-slate report --output hygiene.md
  clean-slate comment --inline
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--session-file", type=Path, default=None,
                        help=f"Where the last scan is stored (default: {DEFAULT_SESSION_FILE})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show debug output for every finding")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only show warnings and errors")

    commands = parser.add_subparsers(dest="command")

    scan = commands.add_parser("scan", help="Scan a directory for code hygiene issues")
    scan.add_argument("directory", type=Path, help="Directory to scan")
    scan.add_argument("--dry-run", action="store_true",
                      help="Show issues without remembering them for report/comment")
    scan.add_argument("--max-function-length", type=int, default=MAX_FUNCTION_LENGTH,
                      help=f"Longest allowed function in lines (default: {MAX_FUNCTION_LENGTH})")
    scan.add_argument("--max-nesting", type=int, default=MAX_NESTING_LEVEL,
                      help=f"Deepest allowed control-flow nesting (default: {MAX_NESTING_LEVEL})")

    report = commands.add_parser("report", help="Generate a markdown report of the last scan")
    report.add_argument("--output", "-o", type=Path, default=None,
                        help="Report path (default: ./report.md)")

    comment = commands.add_parser("comment", help="Add helpful comments to your code")
    comment.add_argument("--inline", action="store_true",
                         help="Insert comments directly into the code")
    return parser


def _relative(path: str | Path) -> str:
    return os.path.relpath(str(path), str(Path.cwd()))


def cmd_scan(args) -> int:
    directory = args.directory.resolve()
    if not directory.is_dir():
        log.error("Directory not found: %s", args.directory)
        return 1

    print(f"🔍 Scanning {args.directory} for code hygiene issues...")
    settings = AnalysisSettings(
        max_function_length=args.max_function_length,
        max_nesting_level=args.max_nesting,
    )
    result = scan_directory(directory, settings)
    issues = sort_issues(result.issues)

    if issues:
        print(f"Found {len(issues)} issues:")
        for issue in issues:
            print(f"! {issue.kind.label} in {_relative(issue.file_path)}:{issue.line} - {issue.message}")
    elif not result.failed:
        print("✅ No issues found! Your code is clean.")

    if result.failed:
        print("\n❌ Errors:")
        for file, error in result.errors_by_file.items():
            print(f"  {_relative(file)}: {error}")

    if not args.dry_run:
        ScanSession(str(directory), issues).save(args.session_file)
        if issues:
            print("\nRun `clean-slate report` to generate a detailed report")
            print("Run `clean-slate comment --inline` to add helpful comments to your code")

    return 1 if result.failed else 0


def _last_session(args) -> Optional[ScanSession]:
    session = load_session(args.session_file)
    if session is None:
        log.error("No scan results found. Run `clean-slate scan <directory>` first.")
    return session


def cmd_report(args) -> int:
    session = _last_session(args)
    if session is None:
        return 1

    print("📝 Generating report...")
    path = write_report(session.issues, session.directory, args.output)
    print(f"✅ Report generated at {path}")
    return 0


def cmd_comment(args) -> int:
    if not args.inline:
        log.error("Please specify --inline to add comments to your code.")
        return 1

    session = _last_session(args)
    if session is None:
        return 1

    print("💬 Adding inline comments to your code...")
    modified = add_inline_comments(session.issues)
    clear_session(args.session_file)
    print(f"✅ Added comments to {modified} files")
    return 0


COMMANDS = {
    "scan": cmd_scan,
    "report": cmd_report,
    "comment": cmd_comment,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logging.basicConfig(level=log_level, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 1

    try:
        return COMMANDS[args.command](args)
    except (OSError, SessionError) as e:
        log.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
