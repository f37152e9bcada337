"""Application locale and UI message translation using gettext."""

import gettext as gettext_module
import logging
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

DOMAIN = "translatable_forms"
LOCALE_DIR = Path(__file__).parent / "locales"

# Thread-local storage for the active locale and its translations
_thread_local = threading.local()

# Process-wide default, used by threads that never called set_locale()
_default_locale = "en"


def initialize(locale: str = "en") -> None:
    """Initialize the application locale.

    Call once at startup. Threads that later call :func:`set_locale` keep
    their own value; every other thread falls back to this one.

    Args:
        locale: Locale code of the application (e.g. "en", "uk")
    """
    global _default_locale

    _default_locale = locale
    for attr in ("locale", "translation"):
        if hasattr(_thread_local, attr):
            delattr(_thread_local, attr)

    logger.debug(f"Application locale initialized: {locale}")


def set_locale(locale: str) -> None:
    """Switch the active locale for the current thread (one request)."""
    _thread_local.locale = locale
    if hasattr(_thread_local, "translation"):
        del _thread_local.translation


def get_locale() -> str:
    """Return the active application locale code."""
    return getattr(_thread_local, "locale", _default_locale)


def _get_translation() -> gettext_module.NullTranslations:
    if not hasattr(_thread_local, "translation"):
        _thread_local.translation = _load_translation(get_locale())
    return _thread_local.translation


def gettext(message: str) -> str:
    """Translate UI message.

    Args:
        message: Message to translate

    Returns:
        Translated message
    """
    return _get_translation().gettext(message)


def _load_translation(language: str | None = None) -> gettext_module.NullTranslations:
    """Load gettext translation object with fallback.

    Args:
        language: Language code (e.g., "uk", "en")
                 If None, returns NullTranslations (fallback to msgid)
    """
    if not language:
        logger.debug("No language specified, using NullTranslations")
        return gettext_module.NullTranslations()

    try:
        translation = gettext_module.translation(
            domain=DOMAIN,
            localedir=str(LOCALE_DIR),
            languages=[language],
            fallback=True,
        )
        logger.debug(f"Loaded translation for language: {language}")
        return translation
    except Exception as e:
        logger.warning(f"Failed to load translation for {language}: {e}, using fallback")
        return gettext_module.NullTranslations()
