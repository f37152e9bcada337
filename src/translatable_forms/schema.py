from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from markupsafe import Markup, escape
from pydantic import BaseModel, Field, ValidationError, model_validator

from .enums import ContainerType
from .errors import SchemaException


class FieldSchema(BaseModel):
    kind: Literal["field"] = "field"
    type: str = "text"
    name: str
    label: Optional[str] = None
    label_html: bool = False
    state_path: Optional[str] = None
    validation_attribute: Optional[str] = None
    help_text: Optional[str] = None
    required: bool = False
    default: Any = None
    options: list[str] = []
    validation: dict[str, Any] = {}

    @model_validator(mode="after")
    def default_state_path(self) -> "FieldSchema":
        if self.state_path is None:
            self.state_path = self.name
        return self

    @property
    def label_markup(self) -> Optional[Markup]:
        """Label ready for rendering: rich labels as-is, plain labels escaped."""
        if self.label is None:
            return None
        return Markup(self.label) if self.label_html else escape(self.label)

    def with_state_path(self, state_path: str) -> FieldSchema:
        return self.model_copy(update={"state_path": state_path}, deep=True)

    def with_name(self, name: str) -> FieldSchema:
        return self.model_copy(update={"name": name}, deep=True)

    def with_label(self, label: Optional[str], *, html: bool = False) -> FieldSchema:
        return self.model_copy(update={"label": label, "label_html": html}, deep=True)


class ContainerSchema(BaseModel):
    kind: Literal["container"] = "container"
    type: str = ContainerType.SECTION.value
    id: str
    label: Optional[str] = None
    description: str = ""
    children: list[Node] = []
    contained: bool = True
    extra_attributes: dict[str, str] = {}

    def with_children(self, children: list[Node]) -> ContainerSchema:
        return self.model_copy(
            update={"children": children, "extra_attributes": dict(self.extra_attributes)}
        )


class StaticSchema(BaseModel):
    """Content without a value: headings, hints, html blocks."""

    kind: Literal["static"] = "static"
    type: str = "placeholder"
    content: str = ""


Node = Annotated[
    Union[FieldSchema, ContainerSchema, StaticSchema],
    Field(discriminator="kind"),
]

ContainerSchema.model_rebuild()


class FormSchema(BaseModel):
    components: list[Node]


def load_form_schema(path: str | Path) -> FormSchema:
    """Load a ``FormSchema`` from a JSON file."""
    schema_path = Path(path)
    try:
        content = schema_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaException(f"Failed to read schema file {schema_path}: {e}") from e

    try:
        return FormSchema.model_validate_json(content)
    except ValidationError as e:
        error_lines = [f"Invalid form schema in {schema_path}:"]
        for error in e.errors():
            loc = " -> ".join(str(item) for item in error["loc"])
            error_lines.append(f"  - {loc}: {error['msg']}" if loc else f"  - {error['msg']}")
        raise SchemaException("\n".join(error_lines)) from e
