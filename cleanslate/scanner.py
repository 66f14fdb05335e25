"""
cleanslate/scanner.py

File discovery and the batch loop around the hygiene engine.

Every file is analyzed on its own; a file that cannot be read is recorded
as a failure for that file and the batch carries on with the rest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import tree_sitter

from .context import AnalysisSettings
from .finder import scan_source
from .issues import Issue
from .utils import create_javascript_parser

log = logging.getLogger(__name__)

SOURCE_PATTERN = "*.js"
IGNORED_DIRECTORIES = frozenset({"node_modules", "dist", "build"})


class ScanError(RuntimeError):
    """A source file could not be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to scan file {path}: {reason}")
        self.path = path


@dataclass
class ScanResult:
    """Aggregate results of a batch scan."""
    files: List[Path] = field(default_factory=list)
    issues: List[Issue] = field(default_factory=list)
    errors_by_file: Dict[str, str] = field(default_factory=dict)

    @property
    def failed(self) -> bool:
        return bool(self.errors_by_file)


def find_source_files(directory: Path) -> list[Path]:
    """
    Find JavaScript files below a directory.

    Skips dependency and build output directories as well as hidden ones.
    Returns absolute paths in sorted order.
    """
    directory = Path(directory).resolve()
    found = []
    for path in directory.rglob(SOURCE_PATTERN):
        relative_parts = path.relative_to(directory).parts
        if any(
            part in IGNORED_DIRECTORIES or part.startswith(".")
            for part in relative_parts[:-1]
        ):
            continue
        if relative_parts[-1].startswith(".") or not path.is_file():
            continue
        found.append(path)
    return sorted(found)


def scan_file(
    path: Path,
    parser: Optional[tree_sitter.Parser] = None,
    settings: Optional[AnalysisSettings] = None,
) -> list[Issue]:
    """Read and analyze one file. Raises ScanError if it cannot be read."""
    path = Path(path)
    try:
        source_bytes = path.read_bytes()
    except OSError as e:
        raise ScanError(path, e.strerror or str(e)) from e
    return scan_source(source_bytes, str(path), parser, settings)


def scan_files(
    paths: Iterable[Path],
    settings: Optional[AnalysisSettings] = None,
) -> ScanResult:
    result = ScanResult()
    parser = create_javascript_parser()
    for path in paths:
        path = Path(path)
        result.files.append(path)
        log.debug("scanning file %s", path)
        try:
            issues = scan_file(path, parser, settings)
        except ScanError as e:
            log.error("%s", e)
            result.errors_by_file[str(path)] = str(e)
            continue
        log.info("Found %d issues in %s", len(issues), path)
        result.issues.extend(issues)
    return result


def scan_directory(directory: Path, settings: Optional[AnalysisSettings] = None) -> ScanResult:
    directory = Path(directory).resolve()
    files = find_source_files(directory)
    log.info("Found %d JavaScript files to scan in %s", len(files), directory)
    return scan_files(files, settings)
