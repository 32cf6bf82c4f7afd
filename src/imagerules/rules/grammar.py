from __future__ import annotations

import re
from typing import List, Tuple

from imagerules.core.errors import InvalidRuleSyntax

ANY_SIZE = "*"
ORIENTATION_MARKER = "~"

RANGE_RE = re.compile(r"^(\d+)-(\d+)$")
COMPARISON_RE = re.compile(r"^([<=>]*)(\d+)$")
INTEGER_RE = re.compile(r"^-?\d+$")

RULE_SEPARATOR = "|"
NAME_SEPARATOR = ":"
PARAM_SEPARATOR = ","


def split_rule(rule: str) -> Tuple[str, List[str]]:
    """
    "image_size:300,<200" -> ("image_size", ["300", "<200"]).

    A rule without parameters yields an empty list.
    """
    name, sep, rest = rule.strip().partition(NAME_SEPARATOR)
    name = name.strip()
    if not name:
        raise InvalidRuleSyntax(f"Rule has no name: {rule!r}")
    if not sep:
        return name, []
    return name, [p.strip() for p in rest.split(PARAM_SEPARATOR)]


def split_rules(rules: str) -> List[str]:
    return [r for r in (part.strip() for part in rules.split(RULE_SEPARATOR)) if r]


def strip_orientation_marker(token: str) -> Tuple[str, bool]:
    if token.startswith(ORIENTATION_MARKER):
        return token[len(ORIENTATION_MARKER):], True
    return token, False


def parse_int(token: str, rule: str) -> int:
    token = token.strip()
    if not INTEGER_RE.match(token):
        raise InvalidRuleSyntax(f"Expected an integer in rule {rule!r}, got {token!r}")
    return int(token)


def check_param_count(parameters: List[str], rule_name: str) -> None:
    if not 1 <= len(parameters) <= 2:
        raise InvalidRuleSyntax(
            f"{rule_name} takes one or two parameters, got {len(parameters)}: {parameters!r}"
        )
