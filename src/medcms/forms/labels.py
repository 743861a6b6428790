"""Human-readable labels for field keys and enumerated values."""

import re
from typing import Optional

from ..consts import LABEL_OVERRIDES
from ..editor_schema import SelectOption
from ..i18n import gettext as _
from ..schema import FieldDescriptor
from ..utils import split_camel_case
from .inference import SelectOptions, caller_options, extract_enum_values


def format_label(key: str) -> str:
    """Turn a camelCase field key into a label.

    Examples:
        >>> format_label("authorEmail")
        'Author Email'
        >>> format_label("bio")
        'Bio - Field of specialization'
    """
    if key in LABEL_OVERRIDES:
        return LABEL_OVERRIDES[key]
    return " ".join(word[:1].upper() + word[1:] for word in split_camel_case(key))


def format_select_option(value: str) -> str:
    """Format a raw enumerated value for a select box.

    Examples:
        >>> format_select_option("in-progress")
        'In Progress'
        >>> format_select_option("user_ADMIN")
        'User Admin'
    """
    if not value or not isinstance(value, str):
        return value
    words = re.split(r"[-_]", value)
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def select_options_for(
    descriptor: Optional[FieldDescriptor],
    key: str,
    select_options: Optional[SelectOptions] = None,
) -> list[SelectOption]:
    """Options for a select widget, led by the empty placeholder option.

    Caller-supplied options take precedence over values declared on the
    schema; declared values get formatted labels.
    """
    placeholder = SelectOption(
        value="", label=_("Select {label}...").format(label=format_label(key).lower())
    )
    options = caller_options(select_options, key)
    if not options:
        options = [
            SelectOption(value=v, label=format_select_option(v))
            for v in extract_enum_values(descriptor)
        ]
    return [placeholder, *options]
