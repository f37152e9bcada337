"""Locale resolution from configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import LocaleConfig

if TYPE_CHECKING:
    from .config import Config, LocaleEntries

logger = logging.getLogger(__name__)


def normalize_locales(entries: LocaleEntries | None) -> dict[str, str]:
    """Turn any supported locale list into an ordered ``code -> name`` mapping.

    Accepted forms:
        ``["en", "uk"]``                                  -> name is the code
        ``{"en": "English"}``                             -> name as given
        ``{"uk": {"name": "Uk", "native": "українська"}}`` -> native, then name, then code
    """
    if not entries:
        return {}

    if isinstance(entries, dict):
        locales: dict[str, str] = {}
        for code, data in entries.items():
            if isinstance(data, LocaleConfig):
                locales[code] = data.native or data.name or code
            elif isinstance(data, dict):
                locales[code] = data.get("native") or data.get("name") or code
            else:
                locales[code] = data or code
        return locales

    return {code: code for code in entries}


def resolve_locales(config: Config, current_locale: str) -> dict[str, str]:
    """Resolve the locales a form should be edited in.

    The package ``locales`` list wins when non-empty, then the shared
    ``translatable.supported_locales`` list, then the current application
    locale alone.
    """
    locales = normalize_locales(config.locales)
    if locales:
        return locales

    locales = normalize_locales(config.translatable.supported_locales)
    if locales:
        logger.debug("Using shared translatable.supported_locales")
        return locales

    logger.debug(f"No locales configured, falling back to current locale: {current_locale}")
    return {current_locale: current_locale}
