"""Enumeration type definitions"""

from enum import Enum


class FieldKind(str, Enum):
    """Primitive kinds a schema field can declare"""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"
    MIXED = "mixed"


class WidgetKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    PASSWORD = "password"
    EMAIL = "email"
    DATETIME = "datetime"
    DATE = "date"
    FILE = "file"
    VIDEO = "video"
    PDF = "pdf"
    ARRAY = "array"


class BlockType(str, Enum):
    PARAGRAPH = "paragraph"
    IMAGE = "image"


class Language(str, Enum):
    EN = "en"
    AR = "ar"


class PostStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
