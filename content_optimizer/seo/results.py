from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single SEO check: a unit score plus suggestions.

    ``details`` is stored as a read-only mapping and left out of the hash.
    """
    score: float
    suggestions: Tuple[str, ...] = ()
    details: Mapping[str, object] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "suggestions", tuple(self.suggestions))
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "suggestions": list(self.suggestions),
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class SEOReport:
    """Aggregate of all checks, in the fixed check order."""
    overall_score: int
    suggestions: List[str]
    checks: Dict[str, CheckResult]

    def to_dict(self) -> dict:
        return {
            "overallScore": self.overall_score,
            "suggestions": list(self.suggestions),
            "checks": {name: result.to_dict() for name, result in self.checks.items()},
        }
