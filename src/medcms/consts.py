"""Constants for medcms"""

from .enums import WidgetKind

# ==================== File Paths ====================
LOG_FILE_DEFAULT = "data/medcms.log"

# ==================== Widget Inference ====================
# Keys that always get a dedicated upload widget
KEY_WIDGET_OVERRIDES = {
    "videoFile": WidgetKind.VIDEO,
    "pdfFile": WidgetKind.PDF,
    "imageFile": WidgetKind.FILE,
}

CONFIRM_PASSWORD_KEYS = ("confirmpassword", "confirm_password")

TEXTAREA_KEYS = (
    "description",
    "longdescription",
    "content",
    "message",
    "bio",
    "specifications",
)

ENUM_KEY_PATTERNS = (
    "status",
    "type",
    "category",
    "priority",
    "state",
    "role",
    "mode",
)

# Attributes that identify a cross-field reference marker
REFERENCE_ATTRS = ("key", "is_context", "getter")

# ==================== Labels ====================
LABEL_OVERRIDES = {
    "bio": "Bio - Field of specialization",
}

# ==================== Widget Defaults ====================
TEXTAREA_ROWS = 3
LONG_TEXTAREA_ROWS = 5
MAX_IMAGE_THUMBNAILS = 9

ACCEPT_TYPES = {
    WidgetKind.FILE: "image/*",
    WidgetKind.VIDEO: "video/*",
    WidgetKind.PDF: ".pdf,application/pdf",
}

# ==================== Image References ====================
PREVIEWABLE_URL_PATTERNS = [
    r"^https?://",  # http:// or https://
    r"^data:image/",  # inline image data URI
    r"^blob:",  # local object URL
]
IMAGE_FILE_PATTERN = r"\.(png|jpe?g|gif|webp|bmp|svg)$"

# ==================== Bilingual Keys ====================
LANGUAGE_SUFFIXES = {
    "En": "en",
    "Ar": "ar",
}
