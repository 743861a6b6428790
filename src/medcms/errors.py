"""Exception definitions for medcms"""

from .i18n import ngettext


class MedcmsException(Exception):
    """Base exception for all medcms errors.

    All custom exceptions in medcms inherit from this class. Use this as a
    catch-all for medcms-specific errors when you don't need to handle
    specific exception types.
    """

    pass


class ConfigException(MedcmsException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (missing required fields, invalid values)
    """

    pass


class SchemaException(MedcmsException):
    """Raised when a form schema or block request cannot be understood.

    Use this exception when:
    - A preset form name is unknown
    - A content block kind is neither paragraph nor image
    - A field key passed to the form engine is not part of its schema
    """

    pass


class FormValidationError(MedcmsException):
    """Raised when submitted values fail schema validation.

    The form engine itself never raises this from ``submit``; it is used by
    outer surfaces (HTTP, CLI) that need a single error object.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        count = len(self.errors)
        lines = [
            ngettext(
                "Form validation failed ({count} invalid field):",
                "Form validation failed ({count} invalid fields):",
                count,
            ).format(count=count)
        ]
        lines.extend(f"  - {key}: {msg}" for key, msg in self.errors.items())
        super().__init__("\n".join(lines))


class PayloadException(MedcmsException):
    """Raised when a post payload cannot be assembled from editor state."""

    pass
