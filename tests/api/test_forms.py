import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(tmp_path, monkeypatch):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        """
# Interface language
language = "en"

[forms]
textarea_rows = 4
submit_button_text = "Create"
""",
        encoding="utf-8",
    )

    monkeypatch.setenv("CONFIG_FILE", str(config_file))

    from medcms.api import create_app

    app = create_app()
    with TestClient(app) as client:
        yield client


def test_list_forms(client: TestClient):
    response = client.get("/api/v1/forms")
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "forms": ["doctor_create", "post_create", "product_create"],
    }


def test_get_form_schema(client: TestClient):
    response = client.get("/api/v1/forms/product_create/schema")
    assert response.status_code == 200
    data = response.json()
    assert data["submit_button_text"] == "Create"
    fields = {f["key"]: f for f in data["fields"]}
    assert fields["descriptionEn"]["widget"] == "textarea"
    assert fields["descriptionEn"]["rows"] == 4
    assert fields["price"]["widget"] == "number"


def test_unknown_form_schema(client: TestClient):
    response = client.get("/api/v1/forms/invoice/schema")
    assert response.status_code == 404
    assert "Unknown form 'invoice'" in response.json()["detail"]


def test_build_form_schema_with_options(client: TestClient):
    response = client.post(
        "/api/v1/forms/product_create/schema",
        json={
            "default_values": {"nameEn": "Scalpel"},
            "select_options": {"subcategory": [{"value": "s1", "label": "Blades"}]},
        },
    )
    assert response.status_code == 200
    fields = {f["key"]: f for f in response.json()["fields"]}
    assert fields["nameEn"]["default"] == "Scalpel"
    assert fields["subcategory"]["widget"] == "select"
    assert [o["value"] for o in fields["subcategory"]["options"]] == ["", "s1"]


def test_validate_form_errors(client: TestClient):
    response = client.post(
        "/api/v1/forms/post_create/validate",
        json={"values": {"titleEn": "Hello"}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["data"] is None
    assert data["errors"]["titleAr"] == "Title (AR) is required"
    assert "titleEn" not in data["errors"]


def test_validate_form_nested(client: TestClient):
    values = {
        "titleEn": "Hello",
        "titleAr": "مرحبا",
        "contentEn": "Long enough content",
        "contentAr": "محتوى طويل بما يكفي",
        "authorName": "Sami",
        "authorEmail": "sami@medcms.org",
        "postImage": "https://cdn.medcms.org/a.png",
        "category": "news",
        "tags": [],
        "status": "published",
        "featured": True,
    }
    response = client.post(
        "/api/v1/forms/post_create/validate",
        json={"values": values, "nest": True},
    )
    data = response.json()
    assert data["success"] is True
    assert data["errors"] == {}
    assert data["data"]["title"] == {"en": "Hello", "ar": "مرحبا"}
    assert data["data"]["status"] == "published"
