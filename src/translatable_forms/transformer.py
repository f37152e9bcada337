"""Rewrite form schemas so translatable fields are edited once per locale.

Translatable fields are detected by name. With several locales configured,
each run of adjacent translatable fields is replaced by a tab group holding
one tab per locale; every tab carries clones of the fields bound to
``translations.{locale}.{name}`` and labelled with a locale badge. With one
locale only the state path changes. Everything else is left untouched.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Sequence

from markupsafe import Markup, escape

from . import i18n
from .consts import (
    BADGE_CLASS,
    DEFAULT_BADGE_STYLE,
    DEFAULT_TAB_LABEL_FORMAT,
    TAB_GROUP_CLASS,
    TAB_GROUP_ID_PREFIX,
    translation_state_path,
)
from .enums import ContainerType
from .locales import resolve_locales
from .schema import ContainerSchema, FieldSchema, Node
from .translations import (
    extract_translations,
    prepare_translations_for_form,
    remove_translations_from_data,
)
from .utils import unique_id

if TYPE_CHECKING:
    from .config import Config
    from .translations import TranslatableRecord

logger = logging.getLogger(__name__)

BADGE_PATTERN = re.compile(
    r'<span[^>]*class="' + re.escape(BADGE_CLASS) + r'"[^>]*>.*?</span>', re.DOTALL
)
TAB_LABEL_PLACEHOLDER = re.compile(r"\{(CODE|code|name)\}")


class SchemaTransformer:
    """Transform form schemas for a fixed, ordered set of locales.

    Args:
        locales: Ordered ``code -> display name`` mapping; the first entry is
            the default locale.
        badge_style: Inline CSS for locale badges, ``None`` for the built-in style.
        tab_label_format: Tab label template with ``{CODE}``, ``{code}`` and
            ``{name}`` placeholders.
        fallback_locale: Locale used when ``locales`` is empty.
    """

    def __init__(
        self,
        locales: Mapping[str, str],
        *,
        badge_style: Optional[str] = None,
        tab_label_format: str = DEFAULT_TAB_LABEL_FORMAT,
        fallback_locale: str = "en",
    ) -> None:
        self._locales = dict(locales)
        self._badge_style = badge_style or DEFAULT_BADGE_STYLE
        self._tab_label_format = tab_label_format
        self._fallback_locale = fallback_locale

    @classmethod
    def from_config(cls, config: Config, current_locale: Optional[str] = None) -> SchemaTransformer:
        current_locale = current_locale or i18n.get_locale()
        return cls(
            resolve_locales(config, current_locale),
            badge_style=config.badge_style,
            tab_label_format=config.tab_label_format,
            fallback_locale=current_locale,
        )

    def get_locales(self) -> dict[str, str]:
        if not self._locales:
            return {self._fallback_locale: self._fallback_locale}
        return dict(self._locales)

    def get_locale_codes(self) -> list[str]:
        return list(self.get_locales())

    def transform(self, schema: Sequence[Node], translatable_attributes: Iterable[str]) -> list[Node]:
        """Return a new schema with translatable fields bound per locale.

        The input schema is never modified.
        """
        attributes = frozenset(translatable_attributes)
        if not attributes:
            return list(schema)

        locales = self.get_locales()
        logger.debug(
            f"Transforming schema: {len(schema)} components, "
            f"{len(attributes)} translatable attributes, locales={list(locales)}"
        )

        if len(locales) <= 1:
            locale = next(iter(locales))
            return [self._transform_single(node, attributes, locale) for node in schema]

        return self._transform_multiple(schema, attributes)

    def _transform_single(self, node: Node, attributes: frozenset[str], locale: str) -> Node:
        if self._is_translatable_field(node, attributes):
            return self.clone_field_for_locale(node, locale, add_badge=False)

        if isinstance(node, ContainerSchema) and node.children:
            return node.with_children(
                [self._transform_single(child, attributes, locale) for child in node.children]
            )

        return node

    def _transform_multiple(self, nodes: Sequence[Node], attributes: frozenset[str]) -> list[Node]:
        result: list[Node] = []
        group: list[FieldSchema] = []

        for node in nodes:
            if self._is_translatable_field(node, attributes):
                group.append(node)
                continue

            if group:
                result.append(self.create_locale_tabs(group))
                group = []

            if isinstance(node, ContainerSchema) and node.children:
                node = node.with_children(self._transform_multiple(node.children, attributes))
            result.append(node)

        if group:
            result.append(self.create_locale_tabs(group))

        return result

    @staticmethod
    def _is_translatable_field(node: Node, attributes: frozenset[str]) -> bool:
        return isinstance(node, FieldSchema) and node.name in attributes

    def create_locale_tabs(self, fields: Sequence[FieldSchema]) -> ContainerSchema:
        tabs = [
            ContainerSchema(
                type=ContainerType.TAB.value,
                id=code,
                label=self.tab_label(code, name),
                children=[self.clone_field_for_locale(field, code, add_badge=True) for field in fields],
            )
            for code, name in self.get_locales().items()
        ]

        group = ContainerSchema(
            type=ContainerType.TABS.value,
            id=unique_id(TAB_GROUP_ID_PREFIX),
            children=tabs,
            contained=False,
            extra_attributes={"class": TAB_GROUP_CLASS},
        )
        logger.debug(f"Created tab group {group.id} for fields: {[f.name for f in fields]}")
        return group

    def tab_label(self, code: str, name: str) -> str:
        values = {"CODE": code.upper(), "code": code.lower(), "name": name}
        return TAB_LABEL_PLACEHOLDER.sub(lambda m: values[m.group(1)], self._tab_label_format)

    def clone_field_for_locale(self, field: FieldSchema, locale: str, add_badge: bool) -> FieldSchema:
        """Copy ``field`` bound to ``translations.{locale}.{name}``.

        With ``add_badge`` the label gets a locale badge while the validation
        attribute keeps the badge-free text.
        """
        state_path = translation_state_path(locale, field.name)
        cloned = field.with_state_path(state_path).with_name(state_path)

        if add_badge:
            cloned = self._add_locale_badge(cloned, locale)

        return cloned

    def _add_locale_badge(self, field: FieldSchema, locale: str) -> FieldSchema:
        text = label_text(field)

        if text:
            base = Markup(BADGE_PATTERN.sub("", field.label).strip()) if field.label_html else escape(field.label)
        else:
            text = locale.upper()
            base = escape(text)

        label = base + Markup(" ") + self.locale_badge(locale)
        return field.model_copy(
            update={"label": str(label), "label_html": True, "validation_attribute": text}
        )

    def locale_badge(self, locale: str) -> Markup:
        return Markup('<span class="{}" style="{}">{}</span>').format(
            BADGE_CLASS, self._badge_style, locale.upper()
        )

    def prepare_translations_for_form(
        self, record: TranslatableRecord, translatable_attributes: Sequence[str]
    ) -> dict[str, dict[str, Any]]:
        return prepare_translations_for_form(record, translatable_attributes, self.get_locale_codes())

    extract_translations = staticmethod(extract_translations)
    remove_translations_from_data = staticmethod(remove_translations_from_data)


def label_text(field: FieldSchema) -> str:
    """Plain label text with any locale badges removed ("" when unlabelled)."""
    if not field.label:
        return ""
    if field.label_html:
        return Markup(BADGE_PATTERN.sub("", field.label)).striptags()
    return field.label
