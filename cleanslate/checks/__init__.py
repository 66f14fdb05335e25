"""Registry of hygiene checks."""

from __future__ import annotations

from typing import Callable, List

from ..context import AnalysisContext
from ..issues import Issue

from . import (
    comments,
    declarations,
    reachability,
    structure,
)

Check = Callable[[AnalysisContext], List[Issue]]

CHECKS: list[Check] = [
    comments.run_pending_work,
    declarations.run_unused_declarations,
    structure.run_long_functions,
    structure.run_deep_nesting,
    reachability.run_unreachable_code,
]

__all__ = ["CHECKS", "Check"]
