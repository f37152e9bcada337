"""Locale resolution unit tests"""

from translatable_forms.config import Config, LocaleConfig
from translatable_forms.locales import normalize_locales, resolve_locales


def test_normalize_simple_list():
    assert normalize_locales(["en", "uk"]) == {"en": "en", "uk": "uk"}


def test_normalize_detailed_prefers_native_then_name():
    entries = {
        "en": LocaleConfig(name="En", native="English"),
        "uk": LocaleConfig(name="Uk"),
        "de": LocaleConfig(),
    }

    assert normalize_locales(entries) == {"en": "English", "uk": "Uk", "de": "de"}


def test_normalize_plain_mapping():
    assert normalize_locales({"en": "English", "pl": {"native": "polski"}}) == {
        "en": "English",
        "pl": "polski",
    }


def test_normalize_preserves_order():
    assert list(normalize_locales(["uk", "en", "de"])) == ["uk", "en", "de"]


def test_normalize_empty():
    assert normalize_locales(None) == {}
    assert normalize_locales([]) == {}


def test_package_locales_take_precedence_over_shared():
    config = Config(locales=["en", "uk"], translatable={"supported_locales": ["de", "fr"]})

    assert resolve_locales(config, "en") == {"en": "en", "uk": "uk"}


def test_shared_locales_used_when_package_list_empty():
    config = Config(locales=[], translatable={"supported_locales": ["de", "fr"]})

    assert resolve_locales(config, "en") == {"de": "de", "fr": "fr"}


def test_current_locale_when_nothing_configured():
    assert resolve_locales(Config(), "uk") == {"uk": "uk"}
