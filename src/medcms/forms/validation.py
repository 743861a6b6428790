"""Schema validation for submitted form values.

A ``FormSchema`` is compiled into a pydantic model once per schema. Each
field gets a ``BeforeValidator`` that normalizes raw input (trimming,
treating blanks as unset) and an ``AfterValidator`` that applies the field
rules, raising errors whose type is the rule name so messages can be looked
up per rule.
"""

from __future__ import annotations

import copy
import logging
from datetime import date, datetime
from typing import Annotated, Any, Optional, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    create_model,
)
from pydantic_core import PydanticCustomError

from ..enums import FieldKind
from ..i18n import gettext as _
from ..schema import FieldDescriptor, FormSchema, Ref
from .inference import extract_enum_values
from .labels import format_label

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)
_url_adapter = TypeAdapter(HttpUrl)

RULE_NAMES = (
    "required",
    "email",
    "url",
    "min_length",
    "max_length",
    "min",
    "max",
    "more_than",
    "min_items",
    "one_of",
    "item_url",
)

KIND_TYPES = {
    FieldKind.STRING: str,
    FieldKind.NUMBER: Union[int, float],
    FieldKind.BOOLEAN: bool,
    FieldKind.DATE: date,
    FieldKind.ARRAY: list[str],
}


class FormModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


def _fail(rule: str, message: str = "") -> PydanticCustomError:
    return PydanticCustomError(rule, "{message}", {"message": message or rule})


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _default_for(descriptor: FieldDescriptor) -> Any:
    if descriptor.default is None and descriptor.kind == FieldKind.ARRAY:
        return []
    return copy.deepcopy(descriptor.default)


def _normalizer(descriptor: FieldDescriptor):
    rules = descriptor.rules

    def normalize(value: Any) -> Any:
        if rules.trim and isinstance(value, str):
            value = value.strip()
        if descriptor.kind == FieldKind.ARRAY and isinstance(value, (list, tuple)):
            value = [v.strip() if rules.trim and isinstance(v, str) else v for v in value]

        if descriptor.kind == FieldKind.STRING:
            if value is None or value == "":
                if rules.required:
                    raise _fail("required")
                return _default_for(descriptor) if value is None else value
            return value

        if _is_blank(value):
            if rules.required:
                raise _fail("required")
            return _default_for(descriptor)
        if descriptor.kind == FieldKind.DATE:
            return _to_date(value)
        return value

    return normalize


def _to_date(value: Any) -> Any:
    """Reduce datetime input (such as a datetime-local value) to its date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return value
    return value


def _literal_options(descriptor: FieldDescriptor) -> list[str]:
    if descriptor.references:
        return []
    return extract_enum_values(descriptor)


def _checker(descriptor: FieldDescriptor):
    rules = descriptor.rules
    options = _literal_options(descriptor)

    def check(value: Any) -> Any:
        if value is None:
            return value

        if isinstance(value, str):
            if rules.min_length is not None and len(value) < rules.min_length:
                raise _fail("min_length")
            if rules.max_length is not None and len(value) > rules.max_length:
                raise _fail("max_length")
            if rules.email and value:
                try:
                    _email_adapter.validate_python(value)
                except ValidationError:
                    raise _fail("email")
            if rules.url and value:
                try:
                    _url_adapter.validate_python(value)
                except ValidationError:
                    raise _fail("url")

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if rules.min is not None and value < rules.min:
                raise _fail("min")
            if rules.max is not None and value > rules.max:
                raise _fail("max")
            if rules.more_than is not None and value <= rules.more_than:
                raise _fail("more_than")

        if isinstance(value, list):
            if rules.min_items is not None and len(value) < rules.min_items:
                raise _fail("min_items")
            if rules.item_url:
                for item in value:
                    try:
                        _url_adapter.validate_python(item)
                    except ValidationError:
                        raise _fail("item_url")

        if options and value != "" and value not in options:
            raise _fail("one_of")

        return value

    return check


def _annotation(descriptor: FieldDescriptor):
    base = KIND_TYPES.get(descriptor.kind, Any)
    return Annotated[
        Optional[base],
        BeforeValidator(_normalizer(descriptor)),
        AfterValidator(_checker(descriptor)),
    ]


def build_model(schema: FormSchema) -> type[FormModel]:
    """Compile ``schema`` into a pydantic model.

    Field keys become aliases of positional attribute names, so keys that
    collide with ``BaseModel`` attributes are still usable.
    """
    definitions = {}
    for i, (key, descriptor) in enumerate(schema):
        if descriptor.required:
            field = Field(alias=key)
        else:
            field = Field(default_factory=lambda d=descriptor: _default_for(d), alias=key)
        definitions[f"field_{i}"] = (_annotation(descriptor), field)

    model_name = "".join(part.capitalize() for part in schema.name.split("_")) + "Form"
    return create_model(model_name, __base__=FormModel, **definitions)


def default_message(descriptor: FieldDescriptor, key: str, rule: str) -> str:
    label = format_label(key)
    rules = descriptor.rules

    if rule == "required":
        return _("{label} is required").format(label=label)
    if rule == "email":
        return _("{label} must be a valid email").format(label=label)
    if rule == "url":
        return _("{label} must be a valid URL").format(label=label)
    if rule == "min_length":
        return _("{label} must be at least {n} characters").format(label=label, n=rules.min_length)
    if rule == "max_length":
        return _("{label} must be at most {n} characters").format(label=label, n=rules.max_length)
    if rule == "min":
        return _("{label} must be greater than or equal to {n}").format(label=label, n=_num(rules.min))
    if rule == "max":
        return _("{label} must be less than or equal to {n}").format(label=label, n=_num(rules.max))
    if rule == "more_than":
        return _("{label} must be greater than {n}").format(label=label, n=_num(rules.more_than))
    if rule == "min_items":
        return _("{label} must have at least {n} items").format(label=label, n=rules.min_items)
    if rule == "item_url":
        return _("Every {label} entry must be a valid URL").format(label=label)
    if rule == "one_of":
        if descriptor.references:
            refs = ", ".join(format_label(ref.key) for ref in descriptor.references)
            return _("{label} must match {refs}").format(label=label, refs=refs)
        values = ", ".join(extract_enum_values(descriptor))
        return _("{label} must be one of the following values: {values}").format(
            label=label, values=values
        )

    if descriptor.kind == FieldKind.NUMBER:
        return _("{label} must be a number").format(label=label)
    if descriptor.kind == FieldKind.BOOLEAN:
        return _("{label} must be true or false").format(label=label)
    if descriptor.kind == FieldKind.DATE:
        return _("{label} must be a valid date").format(label=label)
    if descriptor.kind == FieldKind.ARRAY:
        return _("{label} must be a list").format(label=label)
    return _("{label} is invalid").format(label=label)


def _num(value: Optional[float]):
    if value is not None and float(value).is_integer():
        return int(value)
    return value


def message_for(descriptor: FieldDescriptor, key: str, rule: str) -> str:
    return descriptor.rules.messages.get(rule) or default_message(descriptor, key, rule)


def _rule_of(error: dict) -> str:
    if error["type"] in RULE_NAMES:
        return error["type"]
    if error["type"] == "missing":
        return "required"
    return "type"


def _reference_errors(schema: FormSchema, data: dict[str, Any]) -> dict[str, str]:
    errors = {}
    for key, descriptor in schema:
        refs = descriptor.references
        value = data.get(key)
        if not refs or _is_blank(value):
            continue
        literals = [v for v in [*descriptor.allowed_values, *descriptor.rules.one_of] if not isinstance(v, Ref)]
        # Context references are resolved by the caller, not against form data
        allowed = literals + [data.get(ref.key) for ref in refs if not ref.is_context]
        if allowed and value not in allowed:
            errors[key] = message_for(descriptor, key, "one_of")
    return errors


def validate_values(
    schema: FormSchema,
    values: dict[str, Any],
    model: Optional[type[FormModel]] = None,
) -> tuple[Optional[dict[str, Any]], dict[str, str]]:
    """Validate raw form values against ``schema``.

    Args:
        schema: Field schema to validate against
        values: Raw values, typically strings from inputs
        model: Model previously compiled with ``build_model``; compiled on
            demand when omitted

    Returns:
        ``(data, {})`` with values coerced to the declared kinds, or
        ``(None, errors)`` where ``errors`` maps each failing key to one
        message.
    """
    model = model or build_model(schema)
    errors: dict[str, str] = {}

    try:
        instance = model.model_validate(values)
    except ValidationError as e:
        for error in e.errors():
            key = str(error["loc"][0]) if error["loc"] else ""
            if key not in schema or key in errors:
                continue
            errors[key] = message_for(schema[key], key, _rule_of(error))
        logger.debug(f"Form '{schema.name}' rejected: {errors}")
        return None, errors

    data = instance.model_dump(by_alias=True)
    errors = _reference_errors(schema, data)
    if errors:
        logger.debug(f"Form '{schema.name}' rejected: {errors}")
        return None, errors

    return {key: data[key] for key in schema.keys()}, {}


def validate_field(
    schema: FormSchema,
    values: dict[str, Any],
    key: str,
    model: Optional[type[FormModel]] = None,
) -> Optional[str]:
    """Validate a single field, returning its error message or ``None``."""
    _, errors = validate_values(schema, values, model)
    return errors.get(key)
