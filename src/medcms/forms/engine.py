"""Schema-driven form state.

``GenericForm`` renders nothing itself. It describes the widgets a UI
should draw (``layout``), keeps the values a user edits, and validates and
hands over a typed payload on ``submit``. Any schema works without
per-field code.
"""

from __future__ import annotations

import copy
import inspect
import logging
import re
import uuid
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Optional

from ..config import FormConfig
from ..consts import ACCEPT_TYPES, IMAGE_FILE_PATTERN
from ..content.blocks import is_image_reference
from ..editor_schema import FormLayout, SelectOption, WidgetSchema
from ..enums import FieldKind, WidgetKind
from ..errors import SchemaException
from ..i18n import gettext as _
from ..schema import FieldDescriptor, FormSchema
from ..utils import get_now, to_minute_iso
from .inference import SelectOptions, infer_widget
from .labels import format_label, select_options_for
from .validation import build_model, validate_values

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[dict[str, Any]], Any]

FILE_WIDGETS = (WidgetKind.FILE, WidgetKind.VIDEO, WidgetKind.PDF)


def _initial_value(descriptor: FieldDescriptor) -> Any:
    if descriptor.default is not None:
        return copy.deepcopy(descriptor.default)
    if descriptor.kind == FieldKind.ARRAY:
        return []
    if descriptor.kind == FieldKind.BOOLEAN:
        return False
    return ""


def _file_name(file: Any) -> str:
    return getattr(file, "filename", None) or getattr(file, "name", None) or ""


def _is_image_file(file: Any) -> bool:
    content_type = getattr(file, "content_type", None) or ""
    if content_type.startswith("image/"):
        return True
    return re.search(IMAGE_FILE_PATTERN, _file_name(file), re.IGNORECASE) is not None


class GenericForm:
    def __init__(
        self,
        schema: FormSchema,
        on_submit: SubmitCallback,
        default_values: Optional[Mapping[str, Any]] = None,
        select_options: Optional[SelectOptions] = None,
        submit_button_text: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
        now: Optional[datetime] = None,
        config: Optional[FormConfig] = None,
    ):
        self.schema = schema
        self.on_submit = on_submit
        self.select_options = dict(select_options or {})
        self.context = dict(context or {})
        self.config = config or FormConfig()
        self.submit_button_text = submit_button_text or self.config.submit_button_text
        self.rendered_at = now or get_now()
        self.is_submitting = False

        defaults = dict(default_values or {})
        self._values: dict[str, Any] = {
            key: copy.deepcopy(defaults[key]) if key in defaults else _initial_value(descriptor)
            for key, descriptor in schema
        }
        self._errors: dict[str, str] = {}
        self._password_visibility: dict[str, bool] = {}
        self._array_inputs: dict[str, str] = {}
        self._file_previews: dict[str, str] = {}
        self._model = build_model(schema)
        self._widgets = {key: self._resolve_widget(key, descriptor) for key, descriptor in schema}

    # ---------- widgets ----------

    def _resolve_widget(self, key: str, descriptor: FieldDescriptor) -> WidgetKind:
        widget = infer_widget(descriptor, key, self.select_options)
        if widget == WidgetKind.SELECT and len(self._options(key)) <= 1:
            logger.warning(f"Field '{key}' has no selectable options, rendering as text")
            return WidgetKind.TEXT
        return widget

    def _options(self, key: str) -> list[SelectOption]:
        return select_options_for(self.schema[key], key, self.select_options)

    def _require(self, key: str) -> FieldDescriptor:
        if key not in self.schema:
            raise SchemaException(f"Unknown field '{key}' for form '{self.schema.name}'")
        return self.schema[key]

    def widget_for(self, key: str) -> WidgetKind:
        self._require(key)
        return self._widgets[key]

    @property
    def is_google_auth(self) -> bool:
        return bool(self.context.get("is_google_auth"))

    def _widget_schema(self, key: str, descriptor: FieldDescriptor) -> WidgetSchema:
        widget = self._widgets[key]
        label = format_label(key)
        lowered = key.lower()
        rules = descriptor.rules

        field = WidgetSchema(
            key=key,
            widget=widget,
            label=label,
            help_text=descriptor.help_text,
            required=rules.required,
            default=self._values.get(key),
            validation={
                name: getattr(rules, name)
                for name in ("min_length", "max_length", "min", "max", "more_than", "min_items")
                if getattr(rules, name) is not None
            },
            placeholder=_("Enter {label}").format(label=label.lower()),
            read_only=key == "email" and self.is_google_auth,
            image_preview="image" in lowered and widget in (WidgetKind.ARRAY, WidgetKind.TEXT, WidgetKind.FILE),
        )

        if widget == WidgetKind.SELECT:
            field.options = self._options(key)
            field.placeholder = field.options[0].label
        elif widget == WidgetKind.TEXTAREA:
            field.rows = self.config.long_textarea_rows if "long" in lowered else self.config.textarea_rows
        elif widget == WidgetKind.ARRAY:
            field.placeholder = _("Add {label} item and click Add").format(label=label.lower())
        elif widget in FILE_WIDGETS:
            field.accept = ACCEPT_TYPES[widget]
            field.placeholder = ""
        elif widget == WidgetKind.DATETIME:
            field.min = to_minute_iso(self.rendered_at)
        elif widget == WidgetKind.CHECKBOX:
            field.placeholder = ""

        return field

    def layout(self) -> FormLayout:
        return FormLayout(
            name=self.schema.name,
            submit_button_text=self.submit_button_text,
            fields=[self._widget_schema(key, descriptor) for key, descriptor in self.schema],
        )

    # ---------- values ----------

    @property
    def values(self) -> dict[str, Any]:
        return copy.deepcopy(self._values)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    def get_value(self, key: str) -> Any:
        self._require(key)
        return self._values.get(key)

    def set_value(self, key: str, value: Any, validate: bool = False) -> None:
        self._require(key)
        self._values[key] = value
        if validate or key in self._errors:
            self.validate_field(key)

    # ---------- password ----------

    def toggle_password_visibility(self, key: str) -> bool:
        self._require(key)
        self._password_visibility[key] = not self._password_visibility.get(key, False)
        return self._password_visibility[key]

    def is_password_visible(self, key: str) -> bool:
        return self._password_visibility.get(key, False)

    def effective_input_type(self, key: str) -> WidgetKind:
        widget = self.widget_for(key)
        if widget == WidgetKind.PASSWORD and self.is_password_visible(key):
            return WidgetKind.TEXT
        return widget

    # ---------- array fields ----------

    def set_array_input(self, key: str, text: str) -> None:
        self._require(key)
        self._array_inputs[key] = text

    def array_input(self, key: str) -> str:
        return self._array_inputs.get(key, "")

    def _array_value(self, key: str) -> list:
        current = self.get_value(key)
        return list(current) if isinstance(current, (list, tuple)) else []

    def add_array_item(self, key: str) -> bool:
        """Commit the staging input to the field's list.

        Returns whether the staged value was added. Blank input is ignored
        and a value already present is not added twice; duplicates carried
        over from default values collapse either way.
        """
        value = self.array_input(key).strip()
        if not value:
            return False

        current = self._array_value(key)
        added = value not in current
        self._array_inputs[key] = ""
        self.set_value(key, list(dict.fromkeys([*current, value])), validate=True)
        return added

    def remove_array_item(self, key: str, index: int) -> None:
        current = self._array_value(key)
        if not 0 <= index < len(current):
            return
        del current[index]
        self.set_value(key, current, validate=True)

    def _shows_thumbnails(self, key: str) -> bool:
        return self.widget_for(key) == WidgetKind.ARRAY and "image" in key.lower()

    def array_chips(self, key: str) -> list[str]:
        """Entries shown as removable chips; empty for image lists."""
        if self._shows_thumbnails(key):
            return []
        return self._array_value(key)

    def image_thumbnails(self, key: str) -> list[str]:
        """Previewable entries of an image list, shown instead of chips."""
        if not self._shows_thumbnails(key):
            return []
        images = [u for u in self._array_value(key) if isinstance(u, str) and is_image_reference(u)]
        return images[: self.config.max_image_thumbnails]

    def remove_image_thumbnail(self, key: str, index: int) -> None:
        """Remove the ``index``-th thumbnail from the underlying list."""
        positions = [
            i for i, u in enumerate(self._array_value(key))
            if isinstance(u, str) and is_image_reference(u)
        ][: self.config.max_image_thumbnails]
        if 0 <= index < len(positions):
            self.remove_array_item(key, positions[index])

    def image_preview(self, key: str) -> Optional[str]:
        """Preview for a single image URL typed into a text field."""
        value = self.get_value(key)
        if "image" in key.lower() and isinstance(value, str) and is_image_reference(value):
            return value
        return self._file_previews.get(key)

    # ---------- files ----------

    def select_file(self, key: str, file: Any) -> None:
        """Store a picked file handle as the field's value."""
        if file is None:
            return
        self.set_value(key, file)
        self.release_preview(key)
        if _is_image_file(file):
            self._file_previews[key] = f"blob:medcms/{uuid.uuid4()}"
            logger.debug(f"Preview created for '{key}': {_file_name(file)}")

    def file_preview(self, key: str) -> Optional[str]:
        return self._file_previews.get(key)

    def release_preview(self, key: str) -> None:
        self._file_previews.pop(key, None)

    def close(self) -> None:
        """Discard transient state; previews are released."""
        self._file_previews.clear()
        self._array_inputs.clear()
        self._password_visibility.clear()

    # ---------- validation / submit ----------

    def validate_field(self, key: str) -> Optional[str]:
        self._require(key)
        _, errors = validate_values(self.schema, self._values, self._model)
        if key in errors:
            self._errors[key] = errors[key]
        else:
            self._errors.pop(key, None)
        return errors.get(key)

    def validate(self) -> tuple[Optional[dict[str, Any]], dict[str, str]]:
        data, errors = validate_values(self.schema, self._values, self._model)
        self._errors = dict(errors)
        return data, errors

    def submit(self) -> Optional[dict[str, Any]]:
        """Validate everything and pass the typed values to ``on_submit``.

        Returns the submitted data, or ``None`` when validation failed (the
        callback is not called and ``errors`` holds one message per field).
        """
        self.is_submitting = True
        try:
            data, errors = self.validate()
            if errors:
                logger.info(f"Submit blocked for '{self.schema.name}': {len(errors)} invalid field(s)")
                return None
            self.on_submit(data)
            return data
        finally:
            self.is_submitting = False

    async def submit_async(self) -> Optional[dict[str, Any]]:
        """Like ``submit`` but awaits a coroutine ``on_submit``."""
        self.is_submitting = True
        try:
            data, errors = self.validate()
            if errors:
                logger.info(f"Submit blocked for '{self.schema.name}': {len(errors)} invalid field(s)")
                return None
            result = self.on_submit(data)
            if inspect.isawaitable(result):
                await result
            return data
        finally:
            self.is_submitting = False
