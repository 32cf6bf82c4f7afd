from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple

from imagerules.adapters.decoder import ImageDecoder, PillowDecoder
from imagerules.adapters.i18n import CatalogTranslator, Translator
from imagerules.adapters.resolver import resolve_image_path
from imagerules.core.errors import DecodeError
from imagerules.core.models import DimensionConstraint, EvaluationResult, ImageDimensions, ValidatorSettings
from imagerules.rules.aspect import evaluate_aspect, parse_aspect_rule
from imagerules.rules.dimension import describe_dimension, evaluate_dimension, parse_dimension_rule
from imagerules.rules.grammar import check_param_count

_LOGGER = logging.getLogger(__name__)


def size_constraints(parameters: Sequence[Any]) -> Tuple[DimensionConstraint, DimensionConstraint]:
    """Width and height constraints. A single rule applies to both."""
    params = [str(p) for p in parameters]
    check_param_count(params, "image_size")
    width = parse_dimension_rule(params[0])
    height = parse_dimension_rule(params[1]) if len(params) > 1 else width
    return width, height


class ImageRuleValidator:
    """
    The image_size and image_aspect rules, free of any host framework.

    `value` is a file path, an upload-like record resolvable to one, an
    ImageDimensions, or a (width, height) pair. An image that cannot be read fails
    validation; a malformed rule raises.
    """

    def __init__(
        self,
        settings: Optional[ValidatorSettings] = None,
        decoder: Optional[ImageDecoder] = None,
        translator: Optional[Translator] = None,
        resolver: Callable[[Any], str] = resolve_image_path,
    ):
        self._settings = settings or ValidatorSettings()
        self._decoder = decoder or PillowDecoder()
        self._translator = translator or CatalogTranslator(locale=self._settings.locale)
        self._resolver = resolver

    @property
    def settings(self) -> ValidatorSettings:
        return self._settings

    @property
    def decoder(self) -> ImageDecoder:
        return self._decoder

    @property
    def translator(self) -> Translator:
        return self._translator

    @property
    def resolver(self) -> Callable[[Any], str]:
        return self._resolver

    # ---------- image access ----------

    def load_dimensions(self, value: Any) -> Optional[ImageDimensions]:
        """Dimensions of `value`, or None when it cannot be resolved or decoded."""
        if isinstance(value, ImageDimensions):
            return value
        if isinstance(value, tuple) and len(value) == 2 and all(isinstance(v, int) for v in value):
            return ImageDimensions(width=value[0], height=value[1])
        try:
            return self.decoder.decode(self.resolver(value))
        except DecodeError as e:
            _LOGGER.debug("Image not readable, failing validation: %s", e)
            return None

    # ---------- image_size ----------

    def evaluate_image_size(
        self, value: Any, parameters: Sequence[str]
    ) -> Optional[Tuple[EvaluationResult, EvaluationResult]]:
        """Per-dimension (width, height) results, or None when the image can't be read."""
        width_rule, height_rule = size_constraints(parameters)
        dims = self.load_dimensions(value)
        if dims is None:
            return None
        return (
            evaluate_dimension(width_rule, dims.width, self.translator),
            evaluate_dimension(height_rule, dims.height, self.translator),
        )

    def validate_image_size(self, value: Any, parameters: Sequence[str]) -> bool:
        """
        Usage: image_size:width[,height]

        Each of width/height is one of "*", "300", "=300", "<300", "<=300", ">300",
        ">=300" or "100-300".
        """
        checks = self.evaluate_image_size(value, parameters)
        if checks is None:
            return False
        width_check, height_check = checks
        passed = width_check.passed and height_check.passed
        _LOGGER.debug("image_size:%s -> %s", ",".join(map(str, parameters)), passed)
        return passed

    def replace_image_size(self, message: str, parameters: Sequence[str]) -> str:
        width_rule, height_rule = size_constraints(parameters)
        return message.replace(":width", describe_dimension(width_rule, self.translator)).replace(
            ":height", describe_dimension(height_rule, self.translator)
        )

    # ---------- image_aspect ----------

    def validate_image_aspect(self, value: Any, parameters: Sequence[str]) -> bool:
        """
        Usage: image_aspect:ratio or image_aspect:width,height

        "0.75", "3,4", or with a "~" prefix ("~3,4") to accept either orientation.
        """
        constraint = parse_aspect_rule(parameters, self.settings.division_scale)
        dims = self.load_dimensions(value)
        if dims is None:
            return False
        passed = evaluate_aspect(constraint, dims, self.settings)
        _LOGGER.debug("image_aspect:%s against %dx%d -> %s", ",".join(map(str, parameters)), dims.width, dims.height, passed)
        return passed

    def replace_image_aspect(self, message: str, parameters: Sequence[str]) -> str:
        # Echoes the first parameter as written ("~3" for "~3,4"), not the computed ratio.
        params: List[str] = list(parameters)
        return message.replace(":aspect", str(params[0]) if params else "")
