"""Internationalisation of the dashboard."""
from typing import Any, Dict, Optional

from app.core.config import settings
from app.i18n.translations import TRANSLATIONS

SUPPORTED_LOCALES = tuple(TRANSLATIONS)


def is_supported_locale(value: Optional[str]) -> bool:
    return value in TRANSLATIONS


def get_translation(locale: Optional[str] = None) -> Dict[str, Any]:
    """Translation tree for ``locale``, falling back to the default locale."""
    if is_supported_locale(locale):
        return TRANSLATIONS[locale]
    return TRANSLATIONS.get(settings.DEFAULT_LOCALE, TRANSLATIONS["es"])


def translate(key: str, locale: Optional[str] = None) -> str:
    """
    Look up a dotted key such as ``members.table.name``.

    The key itself is returned when a segment is missing or the value it
    points at is not a string.
    """
    value: Any = get_translation(locale)
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return key
    return value if isinstance(value, str) else key


__all__ = ["SUPPORTED_LOCALES", "get_translation", "is_supported_locale", "translate"]
