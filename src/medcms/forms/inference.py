"""Widget inference for schema fields.

Schemas declare validation, not UI intent, so the widget for a field is
derived from its key, its kind, its rules and any caller-supplied options.
The rules are checked in a fixed order and the first match wins.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

from ..consts import (
    CONFIRM_PASSWORD_KEYS,
    ENUM_KEY_PATTERNS,
    KEY_WIDGET_OVERRIDES,
    REFERENCE_ATTRS,
    TEXTAREA_KEYS,
)
from ..editor_schema import SelectOption
from ..enums import FieldKind, WidgetKind
from ..schema import FieldDescriptor, Ref

SelectOptions = Mapping[str, Sequence[SelectOption | Mapping[str, str]]]

KIND_WIDGETS = {
    FieldKind.STRING: WidgetKind.TEXT,
    FieldKind.NUMBER: WidgetKind.NUMBER,
    FieldKind.BOOLEAN: WidgetKind.CHECKBOX,
    FieldKind.DATE: WidgetKind.DATE,
}


def is_reference(value: Any) -> bool:
    """Whether ``value`` is a cross-field reference marker rather than an option."""
    if isinstance(value, Ref):
        return True
    if value is None or isinstance(value, (str, int, float, bool)):
        return False
    if isinstance(value, Mapping):
        return any(attr in value for attr in REFERENCE_ATTRS)
    return any(hasattr(value, attr) for attr in REFERENCE_ATTRS)


def _valid_options(values: Iterable[Any]) -> list[str]:
    return [v for v in values if isinstance(v, str) and not is_reference(v)]


def extract_enum_values(descriptor: Optional[FieldDescriptor]) -> list[str]:
    """Collect the selectable values declared on a field.

    Sources are tried in order (explicit allow-list, the ``one_of`` rule, the
    ``choices`` enum) and the first one yielding at least one plain string
    wins. Reference markers and non-string values are dropped.
    """
    if descriptor is None:
        return []

    sources = [descriptor.allowed_values, descriptor.rules.one_of]
    if descriptor.choices is not None:
        sources.append([member.value for member in descriptor.choices])

    for source in sources:
        if not source:
            continue
        options = _valid_options(source)
        if options:
            return options
    return []


def caller_options(select_options: Optional[SelectOptions], key: str) -> list[SelectOption]:
    if not select_options:
        return []
    return [
        opt if isinstance(opt, SelectOption) else SelectOption(**opt)
        for opt in select_options.get(key) or []
    ]


def is_confirm_password_key(key: str) -> bool:
    lowered = key.lower()
    return CONFIRM_PASSWORD_KEYS[0] in lowered or lowered == CONFIRM_PASSWORD_KEYS[1]


def infer_widget(
    descriptor: Optional[FieldDescriptor],
    key: str,
    select_options: Optional[SelectOptions] = None,
) -> WidgetKind:
    lowered = key.lower()

    if key in KEY_WIDGET_OVERRIDES:
        return KEY_WIDGET_OVERRIDES[key]

    if is_confirm_password_key(key):
        return WidgetKind.PASSWORD
    if any(k in lowered for k in TEXTAREA_KEYS):
        return WidgetKind.TEXTAREA

    if caller_options(select_options, key):
        return WidgetKind.SELECT

    if extract_enum_values(descriptor):
        return WidgetKind.SELECT

    kind = descriptor.kind if descriptor is not None else None

    if kind == FieldKind.ARRAY:
        return WidgetKind.ARRAY

    if descriptor is not None and descriptor.rules.email:
        return WidgetKind.EMAIL

    if "password" in lowered:
        return WidgetKind.PASSWORD

    if "time" in lowered or "date" in lowered:
        return WidgetKind.DATETIME

    if kind == FieldKind.STRING and any(p in lowered for p in ENUM_KEY_PATTERNS):
        return WidgetKind.SELECT

    return KIND_WIDGETS.get(kind, WidgetKind.TEXT)
