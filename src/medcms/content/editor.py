"""Stateful block editors for post authoring screens.

``BlockEditor`` keeps one language's blocks in a dense list and assigns each
block a generated id when it is created, so list renderers have a stable key
while every edit still goes through the positional operations in
``medcms.content.blocks``.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Optional

from ..enums import BlockType, Language
from . import blocks as ops
from .blocks import ContentBlock, LocalizedContent

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class BlockEditor:
    """Edit session over one ordered block sequence."""

    def __init__(self, blocks: Optional[Sequence[Any]] = None):
        self._blocks: list[ContentBlock] = ops.parse_blocks(blocks or [])
        self._ids: list[str] = [_new_id() for _ in self._blocks]

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[ContentBlock]:
        return iter(list(self._blocks))

    @property
    def blocks(self) -> list[ContentBlock]:
        return list(self._blocks)

    @property
    def ids(self) -> list[str]:
        return list(self._ids)

    def items(self) -> list[tuple[str, ContentBlock]]:
        return list(zip(self._ids, self._blocks))

    def index_of(self, block_id: str) -> int:
        """Position of ``block_id``, or ``-1`` when no such block exists."""
        try:
            return self._ids.index(block_id)
        except ValueError:
            return -1

    def get(self, block_id: str) -> Optional[ContentBlock]:
        index = self.index_of(block_id)
        return self._blocks[index] if index >= 0 else None

    def add(self, kind: BlockType | str, fields: Optional[Mapping[str, Any]] = None) -> str:
        self._blocks = ops.append(self._blocks, kind, fields)
        self._ids.append(_new_id())
        return self._ids[-1]

    def add_paragraph(self, text: str = "", title: str = "") -> str:
        return self.add(BlockType.PARAGRAPH, {"text": text, "title": title})

    def add_image(self, image_url: str = "", image_alt: str = "", image_caption: str = "") -> str:
        return self.add(
            BlockType.IMAGE,
            {"image_url": image_url, "image_alt": image_alt, "image_caption": image_caption},
        )

    def update(self, block_id: str, fields: Mapping[str, Any]) -> None:
        self._blocks = ops.update_at(self._blocks, self.index_of(block_id), fields)

    def clear_image(self, block_id: str) -> None:
        block = self.get(block_id)
        if block is not None and block.type == BlockType.IMAGE.value:
            self.update(block_id, {"image_url": ""})

    def remove(self, block_id: str) -> None:
        index = self.index_of(block_id)
        self._blocks = ops.remove_at(self._blocks, index)
        if index >= 0:
            del self._ids[index]

    def duplicate(self, block_id: str) -> Optional[str]:
        """Clone a block in place; returns the clone's id."""
        index = self.index_of(block_id)
        if index < 0:
            return None
        self._blocks = ops.duplicate_at(self._blocks, index)
        self._ids.insert(index + 1, _new_id())
        return self._ids[index + 1]

    def move(self, block_id: str, to_index: int) -> None:
        from_index = self.index_of(block_id)
        if from_index < 0 or not 0 <= to_index < len(self._blocks):
            return
        self._blocks = ops.move_at(self._blocks, from_index, to_index)
        self._ids.insert(to_index, self._ids.pop(from_index))

    def move_up(self, block_id: str) -> None:
        self.move(block_id, self.index_of(block_id) - 1)

    def move_down(self, block_id: str) -> None:
        index = self.index_of(block_id)
        if index >= 0:
            self.move(block_id, index + 1)

    def can_move_up(self, block_id: str) -> bool:
        return self.index_of(block_id) > 0

    def can_move_down(self, block_id: str) -> bool:
        index = self.index_of(block_id)
        return 0 <= index < len(self._blocks) - 1


class LocalizedEditor:
    """One independent ``BlockEditor`` per language."""

    def __init__(
        self, content: Optional[LocalizedContent | Mapping[str, Any] | Sequence[Any] | str] = None
    ):
        if content is None:
            content = LocalizedContent()
        elif isinstance(content, Mapping):
            content = LocalizedContent.model_validate(content)
        elif not isinstance(content, LocalizedContent):
            # Legacy posts store a single body shared by both languages
            if isinstance(content, str):
                blocks = ops.text_to_blocks(content)
            else:
                blocks = ops.parse_blocks(content)
            content = LocalizedContent(en=blocks, ar=[b.model_copy(deep=True) for b in blocks])

        self.editors = {
            Language.EN.value: BlockEditor(content.en),
            Language.AR.value: BlockEditor(content.ar),
        }

    def __getitem__(self, language: Language | str) -> BlockEditor:
        lang = language.value if isinstance(language, Language) else language
        return self.editors[lang]

    @property
    def en(self) -> BlockEditor:
        return self.editors[Language.EN.value]

    @property
    def ar(self) -> BlockEditor:
        return self.editors[Language.AR.value]

    def to_content(self) -> LocalizedContent:
        return LocalizedContent(en=self.en.blocks, ar=self.ar.blocks)
