from __future__ import annotations


class RuleError(Exception):
    """
    A rule that can never be evaluated. These signal a misconfigured deployment,
    not bad input data, and are meant to fail loudly.
    """


class InvalidRuleSyntax(RuleError, ValueError):
    """Rule string matches none of the recognized grammars."""


class ConfigurationError(RuleError):
    """Aspect rule with a zero or infinite ratio."""


class DecodeError(Exception):
    """Image could not be located or read. Validators turn this into a plain failure."""
