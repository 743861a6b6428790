from __future__ import annotations

from .bilingual import localize_list, nest_bilingual
from .engine import GenericForm
from .inference import extract_enum_values, infer_widget, is_reference
from .labels import format_label, format_select_option, select_options_for
from .presets import get_schema
from .validation import build_model, validate_values

__all__ = [
    "GenericForm",
    "build_model",
    "extract_enum_values",
    "format_label",
    "format_select_option",
    "get_schema",
    "infer_widget",
    "is_reference",
    "localize_list",
    "nest_bilingual",
    "select_options_for",
    "validate_values",
]
