"""
Hand-off of the last scan to follow-up commands.

``clean-slate scan`` writes the session once; ``report`` and ``comment``
read it. The next scan overwrites it, and ``comment --inline`` clears it
because the annotated sources no longer match its line numbers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .issues import Issue

log = logging.getLogger(__name__)

DEFAULT_SESSION_FILE = Path(".clean-slate") / "last-scan.json"
SESSION_VERSION = 1


class SessionError(RuntimeError):
    """The session file exists but could not be decoded."""


@dataclass
class ScanSession:
    directory: str
    issues: List[Issue] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "version": SESSION_VERSION,
            "directory": self.directory,
            "issues": [issue.to_dict() for issue in self.issues],
        }

    def save(self, path: Optional[Path] = None) -> Path:
        path = Path(path) if path is not None else Path.cwd() / DEFAULT_SESSION_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        log.debug("saved %d issues to %s", len(self.issues), path)
        return path


def load_session(path: Optional[Path] = None) -> Optional[ScanSession]:
    """Load the last scan, or None when no scan has been recorded yet."""
    path = Path(path) if path is not None else Path.cwd() / DEFAULT_SESSION_FILE
    if not path.exists():
        return None

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return ScanSession(
            directory=data["directory"],
            issues=[Issue.from_dict(item) for item in data["issues"]],
        )
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise SessionError(f"Corrupt session file {path}: {e}") from e


def clear_session(path: Optional[Path] = None) -> None:
    """Forget the last scan once its line numbers no longer match the sources."""
    path = Path(path) if path is not None else Path.cwd() / DEFAULT_SESSION_FILE
    if path.exists():
        path.unlink()
        log.debug("cleared session %s", path)
