"""Preset form schema tests"""

import pytest

from medcms.enums import WidgetKind
from medcms.errors import SchemaException
from medcms.forms import GenericForm, get_schema, validate_values
from medcms.forms.presets import SCHEMAS


def valid_post():
    return {
        "titleEn": "New sterilizer line",
        "titleAr": "خط أجهزة تعقيم جديد",
        "contentEn": "We now ship autoclaves.",
        "contentAr": "نحن الآن نشحن أجهزة التعقيم.",
        "authorName": "Dr. Sami",
        "authorEmail": "sami@medcms.org",
        "postImage": "https://cdn.medcms.org/post.jpg",
        "category": "news",
        "tags": ["equipment"],
        "status": "draft",
        "featured": False,
    }


def valid_product():
    return {
        "nameEn": "Scalpel",
        "nameAr": "مشرط",
        "descriptionEn": "Steel scalpel",
        "descriptionAr": "مشرط فولاذي",
        "longDescriptionEn": "A long description",
        "longDescriptionAr": "وصف طويل",
        "price": "12.5",
        "subcategory": "surgical",
        "images": ["https://cdn.medcms.org/scalpel.png"],
        "features": [],
        "specifications": "",
        "inStock": True,
        "stockQuantity": "3",
        "shippingEn": "",
        "shippingAr": "",
        "warrantyEn": "",
        "warrantyAr": "",
        "certifications": [],
    }


def test_get_schema():
    assert set(SCHEMAS) == {"post_create", "doctor_create", "product_create"}
    assert get_schema("post_create").name == "post_create"


def test_unknown_schema():
    with pytest.raises(SchemaException, match="Available forms: doctor_create, post_create, product_create"):
        get_schema("invoice")


def test_post_schema_accepts_valid_post():
    data, errors = validate_values(get_schema("post_create"), valid_post())
    assert errors == {}
    assert data["authorEmail"] == "sami@medcms.org"


@pytest.mark.parametrize(
    "overrides, key, message",
    [
        ({"titleEn": ""}, "titleEn", "Title (EN) is required"),
        ({"contentAr": "short"}, "contentAr", "Content (AR) must be at least 10 characters"),
        ({"authorEmail": "sami"}, "authorEmail", "Invalid email"),
        ({"postImage": "post.jpg"}, "postImage", "Post image must be a valid URL"),
        ({"status": "deleted"}, "status", "Status must be one of the following values: draft, published, archived"),
    ],
)
def test_post_schema_messages(overrides, key, message):
    values = {**valid_post(), **overrides}
    _, errors = validate_values(get_schema("post_create"), values)
    assert errors[key] == message


def test_product_schema_coerces_numbers():
    data, errors = validate_values(get_schema("product_create"), valid_product())
    assert errors == {}
    assert data["price"] == 12.5
    assert data["stockQuantity"] == 3


@pytest.mark.parametrize(
    "overrides, key, message",
    [
        ({"price": "0"}, "price", "Price must be greater than 0"),
        ({"price": "cheap"}, "price", "Price must be a number"),
        ({"price": ""}, "price", "Price is required"),
        ({"stockQuantity": "-1"}, "stockQuantity", "Stock quantity cannot be negative"),
        ({"images": []}, "images", "At least one image is required"),
        ({"images": ["scalpel.png"]}, "images", "Image must be a valid URL"),
    ],
)
def test_product_schema_messages(overrides, key, message):
    values = {**valid_product(), **overrides}
    _, errors = validate_values(get_schema("product_create"), values)
    assert errors[key] == message


def test_doctor_member_type():
    schema = get_schema("doctor_create")
    form = GenericForm(schema, on_submit=lambda data: None)

    assert form.widget_for("memberType") == WidgetKind.SELECT
    assert [o.label for o in form.layout().get("memberType").options] == [
        "Select member type...",
        "Team Member",
        "Partner",
    ]

    form.set_value("memberType", "guest")
    assert form.validate_field("memberType") == "Member type is required"


def test_product_widgets():
    form = GenericForm(get_schema("product_create"), on_submit=lambda data: None)
    layout = form.layout()

    assert layout.get("descriptionEn").widget == WidgetKind.TEXTAREA
    assert layout.get("longDescriptionAr").rows == 5
    assert layout.get("specifications").widget == WidgetKind.TEXTAREA
    assert layout.get("price").widget == WidgetKind.NUMBER
    assert layout.get("images").widget == WidgetKind.ARRAY
    assert layout.get("inStock").widget == WidgetKind.CHECKBOX
    assert layout.get("inStock").default is True
    # no options were supplied, so the enum-like key falls back to text
    assert layout.get("subcategory").widget == WidgetKind.TEXT
