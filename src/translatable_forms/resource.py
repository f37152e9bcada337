"""Translation support for a model-backed form resource."""

import logging

from .transformer import SchemaTransformer

logger = logging.getLogger(__name__)


def supports_translations(model) -> bool:
    """Whether ``model`` (class or instance) can load and store translations."""
    return callable(getattr(model, "translate", None)) and callable(
        getattr(model, "save_translation", None)
    )


class TranslatableResource:
    """Binds a model class to the transformer used to edit it.

    Args:
        model: Model class; translatable attribute names come from its
            ``translatable`` attribute.
        transformer: Transformer built for the current request's locales.
    """

    def __init__(self, model, transformer: SchemaTransformer) -> None:
        self.model = model
        self.transformer = transformer

    def get_translatable_attributes(self) -> list[str]:
        if not supports_translations(self.model):
            logger.debug(f"{self.model.__name__} does not support translations")
            return []
        return list(getattr(self.model, "translatable", None) or [])

    def get_translatable_locales(self) -> list[str]:
        return self.transformer.get_locale_codes()

    def get_default_translatable_locale(self) -> str:
        return self.get_translatable_locales()[0]

    def has_multiple_translatable_locales(self) -> bool:
        return len(self.get_translatable_locales()) > 1
