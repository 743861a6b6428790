"""Assembly of post payloads handed to the persistence API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..enums import PostStatus
from ..errors import PayloadException
from ..i18n import gettext as _
from .blocks import ContentBlock, LocalizedContent, parse_blocks, text_to_blocks

logger = logging.getLogger(__name__)


class LocalizedString(BaseModel):
    en: str = ""
    ar: str = ""


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreatePostData(_Payload):
    title: Union[str, LocalizedString]
    content: Union[LocalizedContent, list[ContentBlock]]
    author_name: str
    author_email: str
    post_image: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.DRAFT
    featured: bool = False


class UpdatePostData(_Payload):
    title: Optional[Union[str, LocalizedString]] = None
    content: Optional[Union[LocalizedContent, list[ContentBlock]]] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    post_image: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[list[str]] = None
    status: Optional[PostStatus] = None
    featured: Optional[bool] = None


def to_wire(payload: _Payload, *, exclude_unset: bool = False) -> dict[str, Any]:
    """JSON-ready dict with the API's camelCase keys."""
    return payload.model_dump(mode="json", by_alias=True, exclude_unset=exclude_unset)


def _blocks_from(content: Union[str, Sequence[Any], None]) -> list[ContentBlock]:
    # Plain text bodies come from the legacy single-textarea editor
    if isinstance(content, str):
        return text_to_blocks(content)
    return parse_blocks(content or [])


def build_post_payload(
    *,
    title_en: str,
    title_ar: str,
    author_name: str,
    author_email: str,
    content_en: Union[str, Sequence[Any]],
    content_ar: Union[str, Sequence[Any]],
    post_image: str = "",
    category: str = "",
    tags: Optional[Sequence[str]] = None,
    status: PostStatus | str = PostStatus.DRAFT,
    featured: bool = False,
    require_both_languages: bool = True,
) -> CreatePostData:
    """Build a ``CreatePostData`` from the post editor's state.

    Text fields are trimmed and plain-text content is split into paragraph
    blocks. Titles and block lists are required for both languages unless
    ``require_both_languages`` is false, in which case one language is
    enough.

    Raises:
        PayloadException: a required part of the post is missing
    """
    title_en, title_ar = (title_en or "").strip(), (title_ar or "").strip()
    author_name, author_email = (author_name or "").strip(), (author_email or "").strip()
    blocks_en, blocks_ar = _blocks_from(content_en), _blocks_from(content_ar)

    if require_both_languages:
        titles_ok = bool(title_en and title_ar)
        content_ok = bool(blocks_en and blocks_ar)
    else:
        titles_ok = bool(title_en or title_ar)
        content_ok = bool(blocks_en or blocks_ar)

    if not titles_ok:
        raise PayloadException(_("Both English and Arabic titles are required"))
    if not author_name or not author_email:
        raise PayloadException(_("Author name and email are required"))
    if not content_ok:
        raise PayloadException(_("Both English and Arabic content blocks are required"))

    payload = CreatePostData(
        title=LocalizedString(en=title_en, ar=title_ar),
        content=LocalizedContent(en=blocks_en, ar=blocks_ar),
        author_name=author_name,
        author_email=author_email,
        post_image=(post_image or "").strip(),
        category=category or "",
        tags=[t.strip() for t in tags or [] if t and t.strip()],
        status=PostStatus(status),
        featured=featured,
    )
    logger.debug(
        f"Built post payload: {len(blocks_en)} en blocks, {len(blocks_ar)} ar blocks"
    )
    return payload
