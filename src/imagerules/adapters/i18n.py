"""Message catalog used to explain rule outcomes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol


class Translator(Protocol):
    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        ...


def replace_placeholders(template: str, params: Mapping[str, Any]) -> str:
    """Substitute ":name" placeholders. Longer names go first so ":size" leaves ":size1" alone."""
    for name in sorted(params, key=len, reverse=True):
        template = template.replace(f":{name}", str(params[name]))
    return template


@dataclass
class CatalogTranslator:
    default_locale: str = "en"
    locale: Optional[str] = None
    _translations: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self._translations:
            return
        self._translations = {
            "en": {
                "any-size": "any size",
                "between": "between :size1 and :size2 pixels",
                "equal": ":size pixels",
                "lessthan": "less than :size pixels",
                "lessthanorequal": "less than or equal to :size pixels",
                "greaterthan": "greater than :size pixels",
                "greaterthanorequal": "greater than or equal to :size pixels",
                "image_size": "The :attribute must be :width wide and :height tall.",
                "image_aspect": "The :attribute aspect ratio must be :aspect.",
            },
        }

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        catalog = self._translations.get(self.locale or self.default_locale) or self._translations[self.default_locale]
        return replace_placeholders(catalog.get(key, key), params or {})
