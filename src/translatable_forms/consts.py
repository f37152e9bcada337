"""Constants for translatable forms"""

# ==================== File Paths ====================
DATABASE_PATH = "data/translatable_forms.db"
LOG_FILE_DEFAULT = "data/translatable_forms.log"
CONFIG_FILE_DEFAULT = "config.toml"

# ==================== Settings ====================
ENV_PREFIX = "TRANSLATABLE_FORMS_"
ENV_NESTED_DELIMITER = "__"

# ==================== Translations ====================
TRANSLATIONS_KEY = "translations"

# ==================== Rendering ====================
DEFAULT_TAB_LABEL_FORMAT = "{CODE} - {name}"
DEFAULT_BADGE_STYLE = (
    "display: inline-flex; align-items: center; padding: 2px 8px; "
    "font-size: 11px; font-weight: 600; line-height: 1; border-radius: 9999px; "
    "background-color: rgb(var(--primary-500)); color: white; margin-left: 8px;"
)
BADGE_CLASS = "locale-badge"
TAB_GROUP_ID_PREFIX = "locale_tabs_"
TAB_GROUP_CLASS = "translatable-locale-tabs"

# ==================== Database Configuration ====================
DB_MAX_CONNECTIONS = 20
DB_STALE_TIMEOUT = 300  # 5 minutes
DB_JOURNAL_MODE = "wal"
DB_SYNCHRONOUS = "NORMAL"
DB_BUSY_TIMEOUT = 5000  # 5 seconds

# ==================== Database Pragmas ====================
DB_PRAGMAS = {
    "journal_mode": DB_JOURNAL_MODE,
    "synchronous": DB_SYNCHRONOUS,
    "busy_timeout": DB_BUSY_TIMEOUT,
    "foreign_keys": 1,
}


def translation_state_path(locale: str, name: str) -> str:
    """Build the state path a translated field binds to.

    Examples:
        >>> translation_state_path("en", "title")
        'translations.en.title'
    """
    return f"{TRANSLATIONS_KEY}.{locale}.{name}"
