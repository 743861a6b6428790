"""Localization helper tests"""

from types import SimpleNamespace

import pytest

from medcms import i18n
from medcms.enums import Language
from medcms.i18n import localize_content, resolve_localized_field, resolve_localized_text

TITLE = {"en": "Hello", "ar": "مرحبا"}


@pytest.mark.parametrize(
    "value, language, expected",
    [
        (TITLE, "ar", "مرحبا"),
        (TITLE, "en", "Hello"),
        (TITLE, "fr", "Hello"),
        (TITLE, Language.AR, "مرحبا"),
        ({"ar": "مرحبا"}, "en", "مرحبا"),
        ({"en": "", "ar": "مرحبا"}, "en", "مرحبا"),
        ("Shared", "ar", "Shared"),
        ({}, "en", ""),
        (None, "en", ""),
        (42, "en", ""),
    ],
)
def test_resolve_localized_text(value, language, expected):
    assert resolve_localized_text(value, language) == expected


def test_resolve_localized_field():
    category = {"name": {"en": "Surgical", "ar": "جراحي"}}
    assert resolve_localized_field(category, "name", "ar") == "جراحي"
    assert resolve_localized_field(SimpleNamespace(name="Plain"), "name", "ar") == "Plain"
    assert resolve_localized_field(None, "name", "en") == ""
    assert resolve_localized_field(category, "missing", "en") == ""


def test_localize_content():
    content = {"en": [{"type": "paragraph"}], "ar": []}
    assert localize_content(content, "en") == [{"type": "paragraph"}]
    # Arabic is empty so English is shown
    assert localize_content(content, "ar") == [{"type": "paragraph"}]
    assert localize_content([{"type": "image"}], "ar") == [{"type": "image"}]
    assert localize_content(SimpleNamespace(en=[], ar=["x"]), "en") == ["x"]
    assert localize_content(None, "en") == []


def test_gettext_falls_back_to_message_id():
    i18n.initialize("ar")
    try:
        assert i18n.gettext("Name is required") == "Name is required"
        assert i18n.ngettext("item", "items", 2) == "items"
    finally:
        i18n.initialize("en")
