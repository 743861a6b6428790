import logging
from typing import Any, Literal, Union

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ...content import blocks as ops
from ...content import build_post_payload, to_wire
from ...enums import BlockType, Language, PostStatus
from ...errors import PayloadException, SchemaException
from ...i18n import localize_content, resolve_localized_field

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content", tags=["content"])


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BlockOperationRequest(_CamelModel):
    blocks: list[dict[str, Any]] = []
    operation: Literal["append", "update", "remove", "duplicate", "move"]
    kind: BlockType | None = None
    index: int = 0
    to: int = 0
    fields: dict[str, Any] = {}


class BlockOperationResponse(BaseModel):
    success: bool = True
    blocks: list[dict[str, Any]] = []
    error: str | None = None


class PostPayloadRequest(_CamelModel):
    title_en: str = ""
    title_ar: str = ""
    author_name: str = ""
    author_email: str = ""
    content_en: Union[list[dict[str, Any]], str] = []
    content_ar: Union[list[dict[str, Any]], str] = []
    post_image: str = ""
    category: str = ""
    tags: list[str] = []
    status: PostStatus = PostStatus.DRAFT
    featured: bool = False


class PostPayloadResponse(BaseModel):
    success: bool
    payload: dict[str, Any] | None = None
    error: str | None = None


class RenderRequest(BaseModel):
    post: dict[str, Any]
    language: Language = Language.EN


class RenderResponse(BaseModel):
    success: bool = True
    title: str = ""
    blocks: list[dict[str, Any]] = []
    error: str | None = None


def _apply(body: BlockOperationRequest) -> list:
    blocks = ops.parse_blocks(body.blocks)
    if body.operation == "append":
        if body.kind is None:
            raise SchemaException("'kind' is required to append a block")
        return ops.append(blocks, body.kind, body.fields)
    if body.operation == "update":
        return ops.update_at(blocks, body.index, body.fields)
    if body.operation == "remove":
        return ops.remove_at(blocks, body.index)
    if body.operation == "duplicate":
        return ops.duplicate_at(blocks, body.index)
    return ops.move_at(blocks, body.index, body.to)


@router.post("/blocks", response_model=BlockOperationResponse)
def apply_block_operation(body: BlockOperationRequest):
    try:
        blocks = _apply(body)
    except (SchemaException, ValidationError) as e:
        return JSONResponse(
            status_code=400,
            content=BlockOperationResponse(success=False, error=str(e)).model_dump(),
        )
    return BlockOperationResponse(blocks=ops.blocks_to_wire(blocks))


@router.post("/payload", response_model=PostPayloadResponse)
def assemble_post_payload(request: Request, body: PostPayloadRequest):
    editor_config = request.app.state.config.editor
    try:
        payload = build_post_payload(
            title_en=body.title_en,
            title_ar=body.title_ar,
            author_name=body.author_name,
            author_email=body.author_email,
            content_en=body.content_en,
            content_ar=body.content_ar,
            post_image=body.post_image,
            category=body.category,
            tags=body.tags,
            status=body.status,
            featured=body.featured,
            require_both_languages=editor_config.require_both_languages,
        )
    except (PayloadException, ValidationError) as e:
        return JSONResponse(
            status_code=400,
            content=PostPayloadResponse(success=False, error=str(e)).model_dump(),
        )
    return PostPayloadResponse(success=True, payload=to_wire(payload))


@router.post("/render", response_model=RenderResponse)
def render_post(body: RenderRequest):
    """Title and blocks a reader sees for ``language``, with English fallback."""
    try:
        blocks = ops.parse_blocks(localize_content(body.post.get("content"), body.language))
    except ValidationError as e:
        return JSONResponse(
            status_code=400,
            content=RenderResponse(success=False, error=str(e)).model_dump(),
        )
    return RenderResponse(
        title=resolve_localized_field(body.post, "title", body.language),
        blocks=ops.blocks_to_wire(blocks),
    )
