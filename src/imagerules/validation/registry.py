from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from imagerules.core.errors import InvalidRuleSyntax
from imagerules.rules.aspect import parse_aspect_rule
from imagerules.rules.grammar import split_rule, split_rules
from imagerules.validation.report import RuleResult, ValidationReport
from imagerules.validation.validator import ImageRuleValidator, size_constraints

_LOGGER = logging.getLogger(__name__)

IMAGE_SIZE = "image_size"
IMAGE_ASPECT = "image_aspect"


@dataclass(frozen=True)
class RuleHooks:
    """How a host framework calls into a named rule."""
    validate: Callable[[ImageRuleValidator, Any, Sequence[str]], bool]
    replace: Callable[[ImageRuleValidator, str, Sequence[str]], str]
    parse: Callable[[ImageRuleValidator, Sequence[str]], Any]


RULES: Dict[str, RuleHooks] = {
    IMAGE_SIZE: RuleHooks(
        validate=ImageRuleValidator.validate_image_size,
        replace=ImageRuleValidator.replace_image_size,
        parse=lambda validator, params: size_constraints(params),
    ),
    IMAGE_ASPECT: RuleHooks(
        validate=ImageRuleValidator.validate_image_aspect,
        replace=ImageRuleValidator.replace_image_aspect,
        parse=lambda validator, params: parse_aspect_rule(params, validator.settings.division_scale),
    ),
}


def parse_rules(rules: Union[str, Iterable[str]]) -> List[Tuple[str, List[str]]]:
    """
    "image_size:300,200|image_aspect:~3,4" -> [("image_size", ["300", "200"]), ("image_aspect", ["~3", "4"])]

    An iterable of rule strings is accepted as well.
    """
    items = split_rules(rules) if isinstance(rules, str) else [r for r in rules if r.strip()]
    parsed: List[Tuple[str, List[str]]] = []
    for item in items:
        name, params = split_rule(item)
        if name not in RULES:
            raise InvalidRuleSyntax(f"Unknown image rule: {name}")
        if not params:
            raise InvalidRuleSyntax(f"Rule {name} needs parameters, e.g. {name}:300")
        parsed.append((name, params))
    return parsed


def failure_message(
    validator: ImageRuleValidator, name: str, parameters: Sequence[str], attribute: str = "image"
) -> str:
    template = validator.translator.translate(name, {"attribute": attribute})
    return RULES[name].replace(validator, template, parameters)


def check_image(
    value: Any,
    rules: Union[str, Iterable[str]],
    attribute: str = "image",
    validator: Optional[ImageRuleValidator] = None,
) -> ValidationReport:
    """
    Run every rule against one image and collect a ValidationReport.

    Rule syntax and configuration errors propagate; an unreadable image fails every rule.
    """
    validator = validator or ImageRuleValidator()
    parsed = parse_rules(rules)

    dims = validator.load_dimensions(value)
    metrics = {"width": dims.width if dims else None, "height": dims.height if dims else None}

    results: List[RuleResult] = []
    for name, params in parsed:
        if dims is None:
            # Unreadable image: still reject malformed rules, but never decode again.
            RULES[name].parse(validator, params)
            ok = False
        else:
            ok = RULES[name].validate(validator, dims, params)
        results.append(
            RuleResult(
                rule_id=f"{name}:{','.join(params)}",
                passed=ok,
                message="" if ok else failure_message(validator, name, params, attribute),
                metrics=dict(metrics),
            )
        )

    passed = all(r.passed for r in results)
    _LOGGER.debug("check_image %s: %s", attribute, "pass" if passed else "fail")
    return ValidationReport(passed=passed, results=results)


def format_report_text(report: ValidationReport) -> str:
    lines: List[str] = []
    lines.append("Image Rules Report")
    lines.append("-" * 18)
    lines.append(f"Overall: {'PASS' if report.passed else 'FAIL'}")
    lines.append("")
    for r in report.results:
        mark = "✅" if r.passed else "❌"
        lines.append(f"{mark} {r.rule_id}: {r.message or 'ok'}")
    return "\n".join(lines)
