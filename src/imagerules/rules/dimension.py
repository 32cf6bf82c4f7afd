from __future__ import annotations

from typing import Optional

from imagerules.adapters.i18n import CatalogTranslator, Translator
from imagerules.core.errors import InvalidRuleSyntax
from imagerules.core.models import Comparison, DimensionConstraint, EvaluationResult
from imagerules.rules.grammar import ANY_SIZE, COMPARISON_RE, RANGE_RE

_PREFIXES = {
    "": Comparison.EQUAL,
    "=": Comparison.EQUAL,
    "<": Comparison.LESS_THAN,
    "<=": Comparison.LESS_OR_EQUAL,
    ">": Comparison.GREATER_THAN,
    ">=": Comparison.GREATER_OR_EQUAL,
}


def parse_dimension_rule(rule: str) -> DimensionConstraint:
    """
    Parse a single size rule.

      "*"              any size
      "100-300"        between 100 and 300 pixels, inclusive
      "300" or "=300"  exactly 300 pixels
      "<300", "<=300"  less than (or equal to) 300 pixels
      ">300", ">=300"  greater than (or equal to) 300 pixels

    Raises InvalidRuleSyntax for anything else.
    """
    text = str(rule).strip()
    if text == ANY_SIZE:
        return DimensionConstraint(kind=Comparison.ANY)

    m = RANGE_RE.match(text)
    if m:
        return DimensionConstraint(kind=Comparison.BETWEEN, size=int(m.group(1)), upper=int(m.group(2)))

    m = COMPARISON_RE.match(text)
    if m:
        kind = _PREFIXES.get(m.group(1))
        if kind is not None:
            return DimensionConstraint(kind=kind, size=int(m.group(2)))

    raise InvalidRuleSyntax(f"Unknown image size validation rule: {rule}")


def describe_dimension(constraint: DimensionConstraint, translator: Optional[Translator] = None) -> str:
    translator = translator or CatalogTranslator()
    key = constraint.kind.value
    if constraint.kind is Comparison.ANY:
        return translator.translate(key)
    if constraint.kind is Comparison.BETWEEN:
        return translator.translate(key, {"size1": constraint.size, "size2": constraint.upper})
    return translator.translate(key, {"size": constraint.size})


def evaluate_dimension(
    constraint: DimensionConstraint,
    dimension: int,
    translator: Optional[Translator] = None,
) -> EvaluationResult:
    return EvaluationResult(
        passed=constraint.check(int(dimension)),
        message=describe_dimension(constraint, translator),
    )
