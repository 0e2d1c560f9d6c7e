"""cgd domain models -- re-exports all public model classes.

    - company.py  -- records returned by the lookup services
    - outcome.py  -- per-key outcomes, cache policy, and batch results
"""

from __future__ import annotations

from src.models.company import ListedCompany
from src.models.outcome import (
    Absent,
    BatchResult,
    CachePolicy,
    Failure,
    Fresh,
    Hit,
    Outcome,
    ResolveResult,
)

__all__ = [
    "Absent",
    "BatchResult",
    "CachePolicy",
    "Failure",
    "Fresh",
    "Hit",
    "ListedCompany",
    "Outcome",
    "ResolveResult",
]
