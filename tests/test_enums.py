from medcms.enums import BlockType, FieldKind, Language, PostStatus, WidgetKind


def test_post_status_values():
    assert [s.value for s in PostStatus] == ["draft", "published", "archived"]


def test_enums_are_string_enums():
    assert isinstance(WidgetKind.SELECT, str)
    assert WidgetKind.SELECT == "select"
    assert FieldKind.ARRAY == "array"
    assert BlockType("image") is BlockType.IMAGE
    assert Language.AR == "ar"
