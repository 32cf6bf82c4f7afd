from __future__ import annotations

from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True)
class RuleResult:
    """
    Outcome of one rule (e.g. "image_size:300,200") against one image.

    message is empty when the rule passed.
    """
    rule_id: str
    passed: bool
    message: str
    metrics: dict[str, Any] | None = None

@dataclass(frozen=True)
class ValidationReport:
    """
    Every rule checked against an image. passed is True only if all of them passed.
    """
    passed: bool
    results: list[RuleResult]

    def failures(self) -> list[RuleResult]:
        return [r for r in self.results if not r.passed]
