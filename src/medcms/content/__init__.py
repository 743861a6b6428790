from __future__ import annotations

from .blocks import (
    ContentBlock,
    ImageBlock,
    LocalizedContent,
    ParagraphBlock,
    append,
    blocks_to_wire,
    can_preview_image,
    duplicate_at,
    is_image_reference,
    move_at,
    parse_blocks,
    remove_at,
    text_to_blocks,
    update_at,
)
from .editor import BlockEditor, LocalizedEditor
from .payload import CreatePostData, UpdatePostData, build_post_payload, to_wire

__all__ = [
    "BlockEditor",
    "ContentBlock",
    "CreatePostData",
    "ImageBlock",
    "LocalizedContent",
    "LocalizedEditor",
    "ParagraphBlock",
    "UpdatePostData",
    "append",
    "blocks_to_wire",
    "build_post_payload",
    "can_preview_image",
    "duplicate_at",
    "is_image_reference",
    "move_at",
    "parse_blocks",
    "remove_at",
    "text_to_blocks",
    "to_wire",
    "update_at",
]
