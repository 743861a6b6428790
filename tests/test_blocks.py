"""Content block operation tests"""

import pytest

from medcms.content.blocks import (
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
from medcms.enums import BlockType
from medcms.errors import SchemaException


@pytest.fixture
def blocks():
    return [
        ParagraphBlock(title="A", text="first"),
        ImageBlock(image_url="https://cdn.example.com/x.png", image_alt="x"),
        ParagraphBlock(title="C", text="third"),
    ]


class TestAppend:
    def test_append_paragraph_defaults(self):
        """New paragraph gets empty title and text"""
        result = append([], BlockType.PARAGRAPH)
        assert result == [ParagraphBlock(title="", text="")]

    def test_append_image_with_camel_fields(self):
        """Wire-style keys are accepted"""
        result = append([], "image", {"imageUrl": "https://a/b.png", "imageAlt": "b"})
        assert result[0] == ImageBlock(image_url="https://a/b.png", image_alt="b", image_caption="")

    def test_append_does_not_mutate_input(self, blocks):
        original = list(blocks)
        result = append(blocks, BlockType.PARAGRAPH)
        assert blocks == original
        assert len(result) == 4

    def test_append_unknown_kind(self):
        with pytest.raises(SchemaException, match="Unknown content block type"):
            append([], "video")


class TestUpdate:
    def test_update_merges_fields(self, blocks):
        result = update_at(blocks, 0, {"text": "changed"})
        assert result[0] == ParagraphBlock(title="A", text="changed")
        assert blocks[0].text == "first"

    def test_update_cannot_change_type(self, blocks):
        result = update_at(blocks, 0, {"type": "image", "text": "x"})
        assert isinstance(result[0], ParagraphBlock)
        assert result[0].text == "x"

    def test_update_ignores_unknown_fields(self, blocks):
        result = update_at(blocks, 1, {"text": "nope", "imageCaption": "cap"})
        assert result[1] == ImageBlock(
            image_url="https://cdn.example.com/x.png", image_alt="x", image_caption="cap"
        )

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_update_out_of_range_is_noop(self, blocks, index):
        assert update_at(blocks, index, {"text": "x"}) == blocks


class TestRemove:
    def test_remove(self, blocks):
        result = remove_at(blocks, 1)
        assert [b.type for b in result] == ["paragraph", "paragraph"]
        assert len(blocks) == 3

    @pytest.mark.parametrize("index", [-1, 3])
    def test_remove_out_of_range_is_noop(self, blocks, index):
        assert remove_at(blocks, index) == blocks


class TestDuplicate:
    def test_duplicate_inserts_after(self, blocks):
        result = duplicate_at(blocks, 0)
        assert len(result) == 4
        assert result[0] == result[1]
        assert result[2] == blocks[1]

    def test_duplicate_is_independent(self, blocks):
        """Editing the clone leaves the original untouched"""
        result = duplicate_at(blocks, 0)
        result = update_at(result, 1, {"text": "clone"})
        assert result[0].text == "first"
        assert result[1].text == "clone"
        assert result[0] is not result[1]

    def test_duplicate_out_of_range_is_noop(self, blocks):
        assert duplicate_at(blocks, 5) == blocks


class TestMove:
    def test_move_down(self, blocks):
        result = move_at(blocks, 0, 2)
        assert [getattr(b, "title", "img") for b in result] == ["img", "C", "A"]

    def test_move_up(self, blocks):
        result = move_at(blocks, 2, 0)
        assert [getattr(b, "title", "img") for b in result] == ["C", "A", "img"]

    def test_move_past_end_is_noop(self, blocks):
        """Moving the last block further down changes nothing"""
        assert move_at(blocks, 2, 3) == blocks

    def test_move_before_start_is_noop(self, blocks):
        assert move_at(blocks, 0, -1) == blocks

    def test_move_to_same_index(self, blocks):
        assert move_at(blocks, 1, 1) == blocks


def test_wire_round_trip():
    blocks = [ParagraphBlock(title="T", text="body"), ImageBlock(image_url="https://a/b.png")]
    wire = blocks_to_wire(blocks)

    assert wire == [
        {"type": "paragraph", "title": "T", "text": "body"},
        {"type": "image", "imageUrl": "https://a/b.png", "imageAlt": "", "imageCaption": ""},
    ]
    assert parse_blocks(wire) == blocks


def test_parse_blocks_rejects_unknown_type():
    with pytest.raises(ValueError):
        parse_blocks([{"type": "video"}])


def test_localized_content_from_wire():
    content = LocalizedContent.model_validate(
        {"en": [{"type": "paragraph", "text": "hi"}], "ar": []}
    )
    assert content.for_language("en") == [ParagraphBlock(text="hi")]
    assert content.for_language("ar") == []
    assert content.for_language("fr") == []


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://cdn.example.com/a.jpg", True),
        ("HTTP://cdn.example.com/a", True),
        ("data:image/png;base64,AAAA", True),
        ("blob:http://localhost/123", True),
        ("  https://padded.example.com  ", True),
        ("photo.png", False),
        ("ftp://host/a.png", False),
        ("", False),
        (None, False),
    ],
)
def test_can_preview_image(url, expected):
    assert can_preview_image(url) is expected


def test_is_image_reference_accepts_file_names():
    assert is_image_reference("photo.JPG")
    assert is_image_reference("https://a/b")
    assert not is_image_reference("notes.txt")
    assert not is_image_reference(None)


def test_text_to_blocks():
    assert text_to_blocks("one\n\n  two  \n\n\n") == [
        ParagraphBlock(text="one"),
        ParagraphBlock(text="two"),
    ]
    assert text_to_blocks("   ") == []
    assert text_to_blocks(None) == []
