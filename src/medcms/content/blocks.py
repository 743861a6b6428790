"""Content blocks and the pure operations that edit a block sequence.

A post body is an ordered list of blocks per language. Block identity is its
position. Every operation returns a new list and leaves its input untouched.

Out-of-range indexes (including negative ones) make an operation a no-op: a
new list equal to the input comes back and nothing is raised.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from ..consts import IMAGE_FILE_PATTERN, PREVIEWABLE_URL_PATTERNS
from ..enums import BlockType
from ..errors import SchemaException

logger = logging.getLogger(__name__)


class _Block(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ParagraphBlock(_Block):
    type: Literal["paragraph"] = "paragraph"
    title: str = ""
    text: str = ""


class ImageBlock(_Block):
    type: Literal["image"] = "image"
    image_url: str = ""
    image_alt: str = ""
    image_caption: str = ""


ContentBlock = Annotated[Union[ParagraphBlock, ImageBlock], Field(discriminator="type")]

BLOCK_CLASSES: dict[str, type[_Block]] = {
    BlockType.PARAGRAPH.value: ParagraphBlock,
    BlockType.IMAGE.value: ImageBlock,
}

_blocks_adapter = TypeAdapter(list[ContentBlock])


class LocalizedContent(BaseModel):
    """Per-language block lists; the two lists are edited independently."""

    en: list[ContentBlock] = []
    ar: list[ContentBlock] = []

    def for_language(self, language: str) -> list[ContentBlock]:
        return list(getattr(self, language, None) or [])


def parse_blocks(data: Sequence[Any]) -> list[ContentBlock]:
    """Coerce a list of wire dicts (or blocks) into block models."""
    return _blocks_adapter.validate_python(
        [b.model_dump() if isinstance(b, _Block) else b for b in data or []]
    )


def _as_list(blocks: Sequence[Any]) -> list[ContentBlock]:
    if all(isinstance(b, _Block) for b in blocks):
        return list(blocks)
    return parse_blocks(blocks)


def _in_bounds(blocks: Sequence[Any], index: int) -> bool:
    return 0 <= index < len(blocks)


def _field_values(cls: type[_Block], fields: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Map snake_case or camelCase keys onto model field names.

    ``type`` and keys the variant does not have are dropped; ``None`` means
    "use the default".
    """
    by_alias = {info.alias or name: name for name, info in cls.model_fields.items()}
    values = {}
    for key, value in (fields or {}).items():
        name = key if key in cls.model_fields else by_alias.get(key)
        if name is None:
            logger.debug(f"Ignoring field '{key}' not present on {cls.__name__}")
            continue
        if name != "type" and value is not None:
            values[name] = value
    return values


def append(
    blocks: Sequence[ContentBlock],
    kind: BlockType | str,
    fields: Optional[Mapping[str, Any]] = None,
) -> list[ContentBlock]:
    """Add a new ``kind`` block at the end, omitted fields defaulting to ``""``."""
    kind = kind.value if isinstance(kind, BlockType) else kind
    cls = BLOCK_CLASSES.get(kind)
    if cls is None:
        raise SchemaException(f"Unknown content block type: {kind}")
    return [*_as_list(blocks), cls(**_field_values(cls, fields))]


def update_at(
    blocks: Sequence[ContentBlock], index: int, fields: Mapping[str, Any]
) -> list[ContentBlock]:
    """Shallow-merge ``fields`` into the block at ``index``; its type never changes."""
    result = _as_list(blocks)
    if not _in_bounds(result, index):
        logger.debug(f"update_at ignored, index {index} out of range (len={len(result)})")
        return result

    block = result[index]
    cls = type(block)
    merged = {**block.model_dump(), **_field_values(cls, fields)}
    result[index] = cls.model_validate(merged)
    return result


def remove_at(blocks: Sequence[ContentBlock], index: int) -> list[ContentBlock]:
    result = _as_list(blocks)
    if not _in_bounds(result, index):
        logger.debug(f"remove_at ignored, index {index} out of range (len={len(result)})")
        return result
    del result[index]
    return result


def duplicate_at(blocks: Sequence[ContentBlock], index: int) -> list[ContentBlock]:
    """Insert an independent deep copy of block ``index`` right after it."""
    result = _as_list(blocks)
    if not _in_bounds(result, index):
        logger.debug(f"duplicate_at ignored, index {index} out of range (len={len(result)})")
        return result
    result.insert(index + 1, result[index].model_copy(deep=True))
    return result


def move_at(blocks: Sequence[ContentBlock], from_index: int, to_index: int) -> list[ContentBlock]:
    """Move block ``from_index`` to ``to_index``, shifting the blocks between."""
    result = _as_list(blocks)
    if not _in_bounds(result, from_index) or not _in_bounds(result, to_index):
        logger.debug(
            f"move_at ignored, {from_index} -> {to_index} out of range (len={len(result)})"
        )
        return result
    result.insert(to_index, result.pop(from_index))
    return result


def can_preview_image(url: Optional[str]) -> bool:
    """Whether an image block URL may be rendered as a preview.

    Only ``http(s)://``, ``data:image/`` and ``blob:`` references qualify;
    bare file names do not.
    """
    if not url or not isinstance(url, str):
        return False
    trimmed = url.strip()
    return any(re.match(p, trimmed, re.IGNORECASE) for p in PREVIEWABLE_URL_PATTERNS)


def is_image_reference(url: Optional[str]) -> bool:
    """Like ``can_preview_image`` but also accepts image file names."""
    if can_preview_image(url):
        return True
    if not url or not isinstance(url, str):
        return False
    return re.search(IMAGE_FILE_PATTERN, url.strip(), re.IGNORECASE) is not None


def text_to_blocks(text: Optional[str]) -> list[ContentBlock]:
    """Split plain text on blank lines into paragraph blocks."""
    if not text or not text.strip():
        return []
    return [ParagraphBlock(text=chunk.strip()) for chunk in text.split("\n\n") if chunk.strip()]


def blocks_to_wire(blocks: Sequence[ContentBlock]) -> list[dict[str, Any]]:
    return [block.to_wire() for block in _as_list(blocks)]
