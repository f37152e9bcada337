"""Create and edit flows for records with translatable attributes.

Form data carries translated values under ``translations.{locale}.{field}``.
On save that key is split off, the remaining data goes through the model
as usual, and the translations are written afterwards with
``save_translation``. On edit the key is filled from the stored rows.
"""

import logging
from typing import Any, Mapping, Sequence

from .consts import TRANSLATIONS_KEY
from .enums import FormMode
from .models import database_proxy
from .resource import TranslatableResource
from .schema import Node
from .translations import (
    TranslationsPayload,
    extract_translations,
    remove_translations_from_data,
    save_translations,
)

logger = logging.getLogger(__name__)


class TranslatableRecordPage:
    mode: FormMode

    def __init__(self, resource: TranslatableResource) -> None:
        self.resource = resource

    @property
    def transformer(self):
        return self.resource.transformer

    def form(self, schema: Sequence[Node]) -> list[Node]:
        attributes = self.resource.get_translatable_attributes()
        if not attributes:
            return list(schema)
        return self.transformer.transform(schema, attributes)

    def save_translations(self, record, translations: Mapping[str, Mapping[str, Any]]) -> TranslationsPayload:
        if not translations:
            return {}
        return save_translations(
            record,
            translations,
            self.resource.get_translatable_attributes(),
            self.mode,
        )

    def _split(self, data: Mapping[str, Any]) -> tuple[TranslationsPayload, dict[str, Any]]:
        return extract_translations(data), remove_translations_from_data(data)


class CreateRecordPage(TranslatableRecordPage):
    mode = FormMode.CREATE

    def handle_record_creation(self, data: Mapping[str, Any]):
        translations, data = self._split(data)

        with database_proxy.atomic():
            record = self.resource.model.create(**data)
            saved = self.save_translations(record, translations)
        logger.info(
            f"Created {self.resource.model.__name__} {record.get_id()} "
            f"with translations for {list(saved)}"
        )
        return record


class EditRecordPage(TranslatableRecordPage):
    mode = FormMode.EDIT

    def mutate_form_data_before_fill(self, record, data: Mapping[str, Any]) -> dict[str, Any]:
        data = dict(data)
        attributes = self.resource.get_translatable_attributes()
        if not attributes:
            return data

        data[TRANSLATIONS_KEY] = self.transformer.prepare_translations_for_form(record, attributes)
        return data

    def handle_record_update(self, record, data: Mapping[str, Any]):
        translations, data = self._split(data)

        with database_proxy.atomic():
            for key, value in data.items():
                setattr(record, key, value)
            record.save()
            saved = self.save_translations(record, translations)
        logger.info(
            f"Updated {type(record).__name__} {record.get_id()} "
            f"with translations for {list(saved)}"
        )
        return record
