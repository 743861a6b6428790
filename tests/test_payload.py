"""Post payload assembly tests"""

import pytest

from medcms.content.blocks import ParagraphBlock
from medcms.content.payload import (
    CreatePostData,
    LocalizedString,
    UpdatePostData,
    build_post_payload,
    to_wire,
)
from medcms.enums import PostStatus
from medcms.errors import PayloadException


def payload_kwargs(**overrides):
    kwargs = dict(
        title_en="  Sterilizers  ",
        title_ar="أجهزة التعقيم",
        author_name="Dr. Sami",
        author_email="sami@example.com",
        content_en=[{"type": "paragraph", "title": "", "text": "Hello"}],
        content_ar=[{"type": "paragraph", "title": "", "text": "مرحبا"}],
    )
    kwargs.update(overrides)
    return kwargs


def test_build_post_payload():
    payload = build_post_payload(**payload_kwargs(tags=[" gear ", "", "care"]))

    assert payload.title == LocalizedString(en="Sterilizers", ar="أجهزة التعقيم")
    assert payload.content.en == [ParagraphBlock(text="Hello")]
    assert payload.tags == ["gear", "care"]
    assert payload.status == PostStatus.DRAFT
    assert payload.featured is False


def test_payload_wire_uses_camel_case():
    wire = to_wire(build_post_payload(**payload_kwargs(status="published")))

    assert wire["authorName"] == "Dr. Sami"
    assert wire["authorEmail"] == "sami@example.com"
    assert wire["postImage"] == ""
    assert wire["status"] == "published"
    assert wire["content"]["ar"] == [{"type": "paragraph", "title": "", "text": "مرحبا"}]


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title_ar": "  "}, "Both English and Arabic titles are required"),
        ({"author_email": ""}, "Author name and email are required"),
        ({"content_ar": []}, "Both English and Arabic content blocks are required"),
    ],
)
def test_missing_parts_are_rejected(overrides, message):
    with pytest.raises(PayloadException, match=message):
        build_post_payload(**payload_kwargs(**overrides))


def test_single_language_allowed_when_not_required():
    payload = build_post_payload(
        **payload_kwargs(title_ar="", content_ar=[]), require_both_languages=False
    )
    assert payload.title.ar == ""
    assert payload.content.ar == []


def test_invalid_status():
    with pytest.raises(ValueError):
        build_post_payload(**payload_kwargs(status="deleted"))


def test_update_payload_only_sends_set_fields():
    update = UpdatePostData(featured=True, status=PostStatus.ARCHIVED)
    assert to_wire(update, exclude_unset=True) == {"featured": True, "status": "archived"}


def test_create_payload_accepts_wire_keys():
    data = CreatePostData.model_validate(
        {
            "title": "Legacy title",
            "content": [{"type": "paragraph", "text": "x"}],
            "authorName": "A",
            "authorEmail": "a@example.com",
        }
    )
    assert data.title == "Legacy title"
    assert data.content == [ParagraphBlock(text="x")]


def test_plain_text_content_becomes_paragraphs():
    payload = build_post_payload(
        **payload_kwargs(content_en="First part\n\nSecond part", content_ar="الجزء الأول")
    )
    assert payload.content.en == [ParagraphBlock(text="First part"), ParagraphBlock(text="Second part")]
    assert payload.content.ar == [ParagraphBlock(text="الجزء الأول")]


def test_blank_text_content_is_missing():
    with pytest.raises(PayloadException, match="content blocks are required"):
        build_post_payload(**payload_kwargs(content_ar="   "))
