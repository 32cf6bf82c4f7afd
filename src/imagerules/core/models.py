from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ValidatorSettings:
    """
    Knobs shared by every rule evaluation.

    division_scale:
        Fractional digits kept when a ratio is computed (width / height). Default 12.
    comparison_scale:
        Fractional digits two ratios must agree on to be considered equal. Default 10.
    locale:
        Catalog used to build human-readable messages. Default "en".
    """
    division_scale: int = 12
    comparison_scale: int = 10
    locale: str = "en"


@dataclass(frozen=True)
class ImageDimensions:
    width: int
    height: int


class Comparison(Enum):
    """Kind of size check. Each value doubles as the message catalog key."""
    ANY = "any-size"
    EQUAL = "equal"
    LESS_THAN = "lessthan"
    LESS_OR_EQUAL = "lessthanorequal"
    GREATER_THAN = "greaterthan"
    GREATER_OR_EQUAL = "greaterthanorequal"
    BETWEEN = "between"


@dataclass(frozen=True)
class DimensionConstraint:
    """
    A parsed size rule.

    For BETWEEN, `size` is the lower bound and `upper` the upper bound. The bounds
    are kept in the order they were written: "300-100" never passes.
    """
    kind: Comparison
    size: Optional[int] = None
    upper: Optional[int] = None

    def check(self, dimension: int) -> bool:
        k = self.kind
        if k is Comparison.ANY:
            return True
        if k is Comparison.BETWEEN:
            return self.size <= dimension <= self.upper
        if k is Comparison.EQUAL:
            return dimension == self.size
        if k is Comparison.LESS_THAN:
            return dimension < self.size
        if k is Comparison.LESS_OR_EQUAL:
            return dimension <= self.size
        if k is Comparison.GREATER_THAN:
            return dimension > self.size
        return dimension >= self.size


@dataclass(frozen=True)
class AspectConstraint:
    ratio: Decimal
    orientation_insensitive: bool = False


@dataclass(frozen=True)
class EvaluationResult:
    passed: bool
    message: str
