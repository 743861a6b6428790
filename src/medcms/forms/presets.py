"""Form schemas used by the admin dashboard."""

from ..enums import PostStatus
from ..errors import SchemaException
from ..schema import FormSchema, array, boolean, form_schema, number, string

POST_CREATE_SCHEMA = form_schema(
    "post_create",
    titleEn=string(required=True, messages={"required": "Title (EN) is required"}),
    titleAr=string(required=True, messages={"required": "Title (AR) is required"}),
    contentEn=string(min_length=10, messages={"min_length": "Content (EN) must be at least 10 characters"}),
    contentAr=string(min_length=10, messages={"min_length": "Content (AR) must be at least 10 characters"}),
    authorName=string(required=True, messages={"required": "Author name is required"}),
    authorEmail=string(
        required=True,
        email=True,
        messages={"required": "Author email is required", "email": "Invalid email"},
    ),
    postImage=string(
        required=True,
        url=True,
        messages={"required": "Post image is required", "url": "Post image must be a valid URL"},
    ),
    category=string(required=True, messages={"required": "Category is required"}),
    tags=array(),
    status=string(choices=PostStatus, default=PostStatus.DRAFT.value),
    featured=boolean(default=False),
)

DOCTOR_CREATE_SCHEMA = form_schema(
    "doctor_create",
    nameEn=string(required=True, messages={"required": "Name (EN) is required"}),
    nameAr=string(required=True, messages={"required": "Name (AR) is required"}),
    titleEn=string(required=True, messages={"required": "Title (EN) is required"}),
    titleAr=string(required=True, messages={"required": "Title (AR) is required"}),
    descriptionEn=string(required=True, messages={"required": "Description (EN) is required"}),
    descriptionAr=string(required=True, messages={"required": "Description (AR) is required"}),
    image=string(
        required=True,
        url=True,
        messages={"required": "Image is required", "url": "Image must be a valid URL"},
    ),
    skills=array(),
    qualifications=array(),
    experience=array(),
    locationEn=string(required=True, messages={"required": "Location (EN) is required"}),
    locationAr=string(required=True, messages={"required": "Location (AR) is required"}),
    contact=string(required=True, messages={"required": "Contact is required"}),
    socialMedia=array(item_url=True),
    specializationEn=string(required=True, messages={"required": "Specialization (EN) is required"}),
    specializationAr=string(required=True, messages={"required": "Specialization (AR) is required"}),
    memberType=string(
        required=True,
        allowed_values=["team-member", "partner"],
        messages={"required": "Member type is required", "one_of": "Member type is required"},
    ),
)

PRODUCT_CREATE_SCHEMA = form_schema(
    "product_create",
    nameEn=string(required=True, messages={"required": "Product name (EN) is required"}),
    nameAr=string(required=True, messages={"required": "Product name (AR) is required"}),
    descriptionEn=string(required=True, messages={"required": "Description (EN) is required"}),
    descriptionAr=string(required=True, messages={"required": "Description (AR) is required"}),
    longDescriptionEn=string(required=True, messages={"required": "Long description (EN) is required"}),
    longDescriptionAr=string(required=True, messages={"required": "Long description (AR) is required"}),
    price=number(
        required=True,
        more_than=0,
        messages={
            "required": "Price is required",
            "type": "Price must be a number",
            "more_than": "Price must be greater than 0",
        },
    ),
    subcategory=string(required=True, messages={"required": "Subcategory is required"}),
    images=array(
        item_url=True,
        min_items=1,
        messages={"item_url": "Image must be a valid URL", "min_items": "At least one image is required"},
    ),
    features=array(),
    specifications=string(default=""),
    inStock=boolean(default=True),
    stockQuantity=number(
        min=0,
        default=0,
        messages={
            "type": "Stock quantity must be a number",
            "min": "Stock quantity cannot be negative",
        },
    ),
    shippingEn=string(default=""),
    shippingAr=string(default=""),
    warrantyEn=string(default=""),
    warrantyAr=string(default=""),
    certifications=array(),
)

# Plain string lists the API stores per language
LOCALIZED_LISTS: dict[str, tuple[str, ...]] = {
    "doctor_create": ("skills", "qualifications", "experience"),
}

SCHEMAS: dict[str, FormSchema] = {
    schema.name: schema
    for schema in (POST_CREATE_SCHEMA, DOCTOR_CREATE_SCHEMA, PRODUCT_CREATE_SCHEMA)
}


def get_schema(name: str) -> FormSchema:
    try:
        return SCHEMAS[name]
    except KeyError:
        raise SchemaException(
            f"Unknown form '{name}'. Available forms: {', '.join(sorted(SCHEMAS))}"
        ) from None
