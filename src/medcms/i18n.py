"""Internationalization (i18n) support.

UI strings go through gettext. Localized *content* (``{"en": ..., "ar": ...}``
values coming from the API) is resolved with the explicit ``language``
argument of the ``resolve_*`` helpers rather than any ambient state.
"""

import gettext as gettext_module
import logging
import threading
from collections.abc import Mapping
from pathlib import Path

from .enums import Language

logger = logging.getLogger(__name__)

DOMAIN = "medcms"
LOCALE_DIR = Path(__file__).parent / "locales"

FALLBACK_LANGUAGES = (Language.EN.value, Language.AR.value)

# Thread-local storage for translations
_thread_local = threading.local()

_ui_language = "en"


def initialize(ui_language: str = "en") -> None:
    """Initialize translation system with language configuration.

    Args:
        ui_language: Language code for UI messages
    """
    global _ui_language

    _ui_language = ui_language
    if hasattr(_thread_local, "translation"):
        del _thread_local.translation

    logger.debug(f"Translation initialized: UI={ui_language}")


def _get_translation() -> gettext_module.NullTranslations:
    if not hasattr(_thread_local, "translation"):
        _thread_local.translation = _load_translation(_ui_language)
    return _thread_local.translation


def gettext(message: str) -> str:
    """Translate UI message.

    Args:
        message: Message to translate

    Returns:
        Translated message
    """
    return _get_translation().gettext(message)


def ngettext(singular: str, plural: str, count: int) -> str:
    """Translate UI message with plural form support."""
    return _get_translation().ngettext(singular, plural, count)


def _load_translation(language: str | None = None) -> gettext_module.NullTranslations:
    """Load gettext translation object with fallback.

    Args:
        language: Language code (e.g., "en", "ar")
                 If None, returns NullTranslations (fallback to msgid)

    Returns:
        Translations object with fallback enabled
    """
    if not language:
        logger.debug(
            "No language specified, using NullTranslations (fallback to English)"
        )
        return gettext_module.NullTranslations()

    translation = gettext_module.translation(
        domain=DOMAIN,
        localedir=str(LOCALE_DIR),
        languages=[language],
        fallback=True,
    )
    logger.debug(f"Loaded translation for language: {language}")
    return translation


def resolve_localized_text(value, language: str | Language) -> str:
    """Resolve a localized value for display.

    A plain string is returned untouched. A mapping is looked up by the active
    language, then ``en``, then ``ar``. Anything else resolves to ``""``.

    Examples:
        >>> resolve_localized_text({"en": "Hello", "ar": "مرحبا"}, "ar")
        'مرحبا'
        >>> resolve_localized_text({"en": "Hello", "ar": "مرحبا"}, "fr")
        'Hello'
        >>> resolve_localized_text("Shared", "ar")
        'Shared'
    """
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        lang = language.value if isinstance(language, Language) else language
        for candidate in (lang, *FALLBACK_LANGUAGES):
            text = value.get(candidate)
            if text:
                return text
        return ""
    return ""


def resolve_localized_field(entity, name: str, language: str | Language) -> str:
    """Resolve ``entity[name]`` (or ``entity.name``) as localized text.

    Used for nested values such as a category's name on a product.
    """
    if not entity:
        return ""
    if isinstance(entity, Mapping):
        value = entity.get(name)
    else:
        value = getattr(entity, name, None)
    return resolve_localized_text(value, language)


def localize_content(content, language: str | Language) -> list:
    """Pick the block list to display from localized post content.

    ``content`` is either a plain block list (shared by every language) or a
    per-language container, given as a mapping or an object with ``en`` and
    ``ar`` attributes. Falls back to ``en`` then ``ar`` when the active
    language has no blocks.
    """
    if not content:
        return []
    if isinstance(content, list):
        return content

    lang = language.value if isinstance(language, Language) else language
    for candidate in (lang, *FALLBACK_LANGUAGES):
        if isinstance(content, Mapping):
            blocks = content.get(candidate)
        else:
            blocks = getattr(content, candidate, None)
        if blocks:
            return list(blocks)
    return []
