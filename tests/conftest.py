import pytest
from peewee import BooleanField, IntegerField

from translatable_forms.db import close_db, create_tables, init_db
from translatable_forms.models import BaseModel, TranslatableModel


class Category(TranslatableModel):
    is_active = BooleanField(default=True)
    position = IntegerField(default=0)

    translatable = ["title", "slug", "description"]

    class Meta:
        table_name = "categories"


class Tag(BaseModel):
    position = IntegerField(default=0)

    class Meta:
        table_name = "tags"


@pytest.fixture()
def temp_db(tmp_path):
    db_path = tmp_path / "translatable_forms_test.db"
    init_db(str(db_path))
    create_tables(Category, Tag)
    try:
        yield
    finally:
        close_db()
