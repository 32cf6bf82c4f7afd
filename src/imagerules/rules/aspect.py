from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

from imagerules.core import decimal_math
from imagerules.core.errors import ConfigurationError, InvalidRuleSyntax
from imagerules.core.models import AspectConstraint, ImageDimensions, ValidatorSettings
from imagerules.rules.grammar import check_param_count, parse_int, strip_orientation_marker


def parse_aspect_rule(parameters: Sequence[str], scale: int = 12) -> AspectConstraint:
    """
    Parse aspect rule parameters.

      ["0.75"]     a decimal ratio (width / height)
      ["3", "4"]   width and height
      ["~3", "4"]  either 3:4 or 4:3

    A "~" prefix on the first parameter makes the rule accept both orientations.
    """
    params = [str(p).strip() for p in parameters]
    check_param_count(params, "image_aspect")
    rule = ",".join(params)

    params[0], insensitive = strip_orientation_marker(params[0])

    if len(params) == 1:
        try:
            ratio = Decimal(params[0])
        except InvalidOperation:
            raise InvalidRuleSyntax(f"Unknown image aspect validation rule: {rule}") from None
        if not ratio.is_finite():
            raise InvalidRuleSyntax(f"Unknown image aspect validation rule: {rule}")
    else:
        width = parse_int(params[0], rule)
        height = parse_int(params[1], rule)
        if width == 0 or height == 0:
            raise ConfigurationError(f"Aspect is zero or infinite: {rule}")
        ratio = decimal_math.divide(width, height, scale)

    return AspectConstraint(ratio=ratio, orientation_insensitive=insensitive)


def image_aspect(dimensions: ImageDimensions, scale: int = 12) -> Optional[Decimal]:
    """width / height, or None for an image without height."""
    if dimensions.height == 0:
        return None
    return decimal_math.divide(dimensions.width, dimensions.height, scale)


def evaluate_aspect(
    constraint: AspectConstraint,
    dimensions: ImageDimensions,
    settings: Optional[ValidatorSettings] = None,
) -> bool:
    settings = settings or ValidatorSettings()
    actual = image_aspect(dimensions, settings.division_scale)
    if actual is None:
        return False

    if decimal_math.compare(constraint.ratio, actual, settings.comparison_scale) == 0:
        return True

    if constraint.orientation_insensitive:
        if constraint.ratio == 0:
            raise ConfigurationError(f"Aspect is zero or infinite: {constraint.ratio}")
        inverse = decimal_math.divide(1, constraint.ratio, settings.division_scale)
        if decimal_math.compare(inverse, actual, settings.comparison_scale) == 0:
            return True

    return False
