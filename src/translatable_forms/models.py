"""Peewee ORM model definitions"""

from datetime import datetime
from types import SimpleNamespace
from typing import Any, ClassVar, Mapping, Optional
from zoneinfo import ZoneInfo

from peewee import CharField, DatabaseProxy, DateTimeField, IntegerField, Model
from playhouse.shortcuts import ThreadSafeDatabaseMetadata
from playhouse.sqlite_ext import JSONField

UTC = ZoneInfo("UTC")

# Use DatabaseProxy for deferred database binding
database_proxy = DatabaseProxy()


class BaseModel(Model):
    """Base model class - supports thread-safe metadata"""

    class Meta:
        database = database_proxy
        model_metadata_class = ThreadSafeDatabaseMetadata


class Translation(BaseModel):
    """Translated attribute values of one record in one locale"""

    record_table = CharField()
    record_id = IntegerField()
    locale = CharField()
    data = JSONField(default=dict)
    created_at = DateTimeField(default=lambda: datetime.now(UTC))
    updated_at = DateTimeField(default=lambda: datetime.now(UTC))

    class Meta:
        table_name = "translations"
        indexes = ((("record_table", "record_id", "locale"), True),)

    def save(self, *args, **kwargs):
        """Override save method to auto-update updated_at"""
        if self._pk is not None:
            self.updated_at = datetime.now(UTC)
        return super().save(*args, **kwargs)


class TranslatableModel(BaseModel):
    """Base class for models with per-locale attributes.

    Subclasses list their translatable attribute names in ``translatable``.
    Values live in :class:`Translation` rows, not in the model's own table.
    """

    translatable: ClassVar[list[str]] = []

    def _translations_query(self):
        return Translation.select().where(
            (Translation.record_table == self._meta.table_name)
            & (Translation.record_id == self.get_id())
        )

    def translate(self, locale: str) -> Optional[SimpleNamespace]:
        row = self._translations_query().where(Translation.locale == locale).first()
        if row is None:
            return None
        return SimpleNamespace(**row.data)

    def save_translation(self, locale: str, attributes: Mapping[str, Any]) -> None:
        """Merge ``attributes`` into the record's row for ``locale``."""
        with database_proxy.atomic():
            row = self._translations_query().where(Translation.locale == locale).first()
            if row is None:
                Translation.create(
                    record_table=self._meta.table_name,
                    record_id=self.get_id(),
                    locale=locale,
                    data=dict(attributes),
                )
                return

            row.data = {**row.data, **attributes}
            row.save()

    def get_translations(self) -> dict[str, dict[str, Any]]:
        return {row.locale: row.data for row in self._translations_query().order_by(Translation.id)}

    def delete_instance(self, *args, **kwargs):
        with database_proxy.atomic():
            Translation.delete().where(
                (Translation.record_table == self._meta.table_name)
                & (Translation.record_id == self.get_id())
            ).execute()
            return super().delete_instance(*args, **kwargs)
