from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

from .enums import WidgetKind


class SelectOption(BaseModel):
    value: str
    label: str


class WidgetSchema(BaseModel):
    key: str
    widget: WidgetKind
    label: str
    help_text: Optional[str] = None
    required: bool = False
    default: Any = None
    options: list[SelectOption] = []
    validation: dict[str, Any] = {}
    placeholder: str = ""
    rows: Optional[int] = None
    accept: Optional[str] = None
    min: Optional[str] = None
    read_only: bool = False
    image_preview: bool = False


class FormLayout(BaseModel):
    name: str
    submit_button_text: str = "Submit"
    fields: list[WidgetSchema]

    def get(self, key: str) -> Optional[WidgetSchema]:
        for field in self.fields:
            if field.key == key:
                return field
        return None
