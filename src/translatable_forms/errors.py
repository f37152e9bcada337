"""Exception definitions for translatable forms"""


class TranslatableFormsException(Exception):
    """Base exception for all translatable forms errors.

    All custom exceptions in the package inherit from this class.
    Use this as a catch-all when you don't need to handle specific
    exception types.
    """

    pass


class ConfigException(TranslatableFormsException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (invalid locales, wrong types)
    - A configuration file would be overwritten without permission
    """

    pass


class SchemaException(TranslatableFormsException):
    """Raised when a form schema document cannot be loaded.

    Use this exception when:
    - The schema file cannot be found or read
    - The JSON is malformed
    - A node fails validation (unknown kind, missing name or id)
    """

    pass
