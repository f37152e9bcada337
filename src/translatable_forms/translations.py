"""Move translated values between records and the ``translations`` form key."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol, Sequence

from .consts import TRANSLATIONS_KEY
from .enums import FormMode

logger = logging.getLogger(__name__)

TranslationsPayload = dict[str, dict[str, Any]]


class TranslatableRecord(Protocol):
    def translate(self, locale: str) -> Optional[Any]: ...

    def save_translation(self, locale: str, attributes: Mapping[str, Any]) -> None: ...


def prepare_translations_for_form(
    record: TranslatableRecord,
    translatable_attributes: Sequence[str],
    locales: Sequence[str],
) -> TranslationsPayload:
    """Load every locale's values for a form fill.

    Missing rows and missing values become ``""`` so form bindings never
    see ``None``.
    """
    translations: TranslationsPayload = {}

    for locale in locales:
        translation = record.translate(locale)
        values = {}
        for attribute in translatable_attributes:
            value = getattr(translation, attribute, None) if translation is not None else None
            values[attribute] = "" if value is None else value
        translations[locale] = values

    return translations


def extract_translations(data: Mapping[str, Any]) -> TranslationsPayload:
    return dict(data.get(TRANSLATIONS_KEY) or {})


def remove_translations_from_data(data: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key != TRANSLATIONS_KEY}


def filter_translations(
    translations: Mapping[str, Mapping[str, Any]],
    translatable_attributes: Sequence[str],
    mode: FormMode,
) -> TranslationsPayload:
    """Drop values that should not be written.

    Only translatable attributes are kept. On create, ``None`` and ``""``
    are dropped so untouched locales don't get rows; on edit only ``None``
    is dropped since ``""`` clears a value. Locales left empty are omitted.
    """
    allowed = set(translatable_attributes)
    result: TranslationsPayload = {}

    for locale, attributes in translations.items():
        if not attributes:
            continue

        filtered = {}
        for attribute, value in attributes.items():
            if attribute not in allowed or value is None:
                continue
            if mode == FormMode.CREATE and value == "":
                continue
            filtered[attribute] = value

        if filtered:
            result[locale] = filtered

    return result


def save_translations(
    record: TranslatableRecord,
    translations: Mapping[str, Mapping[str, Any]],
    translatable_attributes: Sequence[str],
    mode: FormMode,
) -> TranslationsPayload:
    """Persist filtered translations through ``record.save_translation``.

    Returns what was saved. Storage errors propagate.
    """
    filtered = filter_translations(translations, translatable_attributes, mode)

    for locale, attributes in filtered.items():
        record.save_translation(locale, attributes)
        logger.debug(f"Saved {len(attributes)} attribute(s) for locale {locale}")

    return filtered
