"""Declarative field schemas consumed by the form engine.

A ``FormSchema`` is an ordered mapping of field key to ``FieldDescriptor``.
Descriptors are validation artifacts: they say what a value must look like,
never how it is rendered. Widget choice is inferred by
``medcms.forms.inference``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import FieldKind


@dataclass(frozen=True)
class Ref:
    """Marker meaning "compare against the value of another field".

    It may sit in the same slot as literal allowed values (for example a
    confirm-password field whose ``one_of`` holds ``Ref("password")``) and is
    never a selectable option.
    """

    key: str
    is_context: bool = False


class FieldRules(BaseModel):
    required: bool = False
    email: bool = False
    url: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min: Optional[float] = None
    max: Optional[float] = None
    more_than: Optional[float] = None
    min_items: Optional[int] = None
    one_of: list[Any] = []
    trim: bool = True
    item_url: bool = False
    messages: dict[str, str] = {}


class FieldDescriptor(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: FieldKind = FieldKind.STRING
    allowed_values: list[Any] = []
    choices: Optional[type[Enum]] = None
    rules: FieldRules = Field(default_factory=FieldRules)
    default: Any = None
    help_text: Optional[str] = None

    @property
    def required(self) -> bool:
        return self.rules.required

    @property
    def references(self) -> list[Ref]:
        return [v for v in [*self.allowed_values, *self.rules.one_of] if isinstance(v, Ref)]


class FormSchema(BaseModel):
    """Ordered field descriptors; iteration order is rendering order."""

    name: str = "form"
    fields: dict[str, FieldDescriptor]

    def __iter__(self):
        return iter(self.fields.items())

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __getitem__(self, key: str) -> FieldDescriptor:
        return self.fields[key]

    def keys(self) -> list[str]:
        return list(self.fields)


def _descriptor(
    kind: FieldKind,
    *,
    default: Any = None,
    allowed_values: Optional[list[Any]] = None,
    choices: Optional[type[Enum]] = None,
    help_text: Optional[str] = None,
    messages: Optional[dict[str, str]] = None,
    **rules: Any,
) -> FieldDescriptor:
    return FieldDescriptor(
        kind=kind,
        default=default,
        allowed_values=allowed_values or [],
        choices=choices,
        help_text=help_text,
        rules=FieldRules(messages=messages or {}, **rules),
    )


def string(**kwargs: Any) -> FieldDescriptor:
    return _descriptor(FieldKind.STRING, **kwargs)


def number(**kwargs: Any) -> FieldDescriptor:
    return _descriptor(FieldKind.NUMBER, **kwargs)


def boolean(**kwargs: Any) -> FieldDescriptor:
    return _descriptor(FieldKind.BOOLEAN, **kwargs)


def date(**kwargs: Any) -> FieldDescriptor:
    return _descriptor(FieldKind.DATE, **kwargs)


def array(**kwargs: Any) -> FieldDescriptor:
    kwargs.setdefault("default", [])
    return _descriptor(FieldKind.ARRAY, **kwargs)


def mixed(**kwargs: Any) -> FieldDescriptor:
    return _descriptor(FieldKind.MIXED, **kwargs)


def form_schema(name: str = "form", /, **fields: FieldDescriptor) -> FormSchema:
    """Build a ``FormSchema`` keeping keyword order as field order.

    ``name`` is positional-only so a field may itself be called ``name``.
    """
    return FormSchema(name=name, fields=fields)
