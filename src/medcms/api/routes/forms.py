import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from ...editor_schema import FormLayout, SelectOption
from ...errors import SchemaException
from ...forms import GenericForm, get_schema, nest_bilingual, validate_values
from ...forms.presets import LOCALIZED_LISTS, SCHEMAS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/forms", tags=["forms"])


class FormListResponse(BaseModel):
    success: bool = True
    forms: list[str]


class LayoutRequest(BaseModel):
    default_values: dict[str, Any] = {}
    select_options: dict[str, list[SelectOption]] = {}


class ValidateRequest(BaseModel):
    values: dict[str, Any]
    nest: bool = False


class ValidateResponse(BaseModel):
    success: bool
    data: dict[str, Any] | None = None
    errors: dict[str, str] = {}


def _schema_or_404(name: str):
    try:
        return get_schema(name)
    except SchemaException as e:
        raise HTTPException(status_code=404, detail=str(e))


def _noop_submit(data: dict) -> None:
    pass


def _layout(request: Request, name: str, payload: LayoutRequest) -> FormLayout:
    form = GenericForm(
        _schema_or_404(name),
        on_submit=_noop_submit,
        default_values=payload.default_values,
        select_options=payload.select_options,
        config=request.app.state.config.forms,
    )
    return form.layout()


@router.get("", response_model=FormListResponse)
def list_forms():
    return FormListResponse(forms=sorted(SCHEMAS))


@router.get("/{name}/schema", response_model=FormLayout)
def get_form_schema(request: Request, name: str):
    return _layout(request, name, LayoutRequest())


@router.post("/{name}/schema", response_model=FormLayout)
def build_form_schema(request: Request, name: str, payload: LayoutRequest):
    return _layout(request, name, payload)


@router.post("/{name}/validate", response_model=ValidateResponse)
def validate_form(name: str, payload: ValidateRequest):
    schema = _schema_or_404(name)
    data, errors = validate_values(schema, payload.values)
    if errors:
        return ValidateResponse(success=False, errors=errors)
    if payload.nest:
        data = nest_bilingual(data, localized_lists=LOCALIZED_LISTS.get(name, ()))
    return ValidateResponse(success=True, data=data)
