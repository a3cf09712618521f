import pytest


def test_failed_then_successful_login(client):
    r = client.post("/admin/login", json={"user": "x", "pass": "y"})
    assert r.status_code == 401
    assert r.json()["error_code"] == "INVALID_CREDENTIALS"
    assert r.json()["message"] == "Erro!"
    assert client.get("/admin/status").json()["data"] == {"authenticated": False, "login_error": True}

    r = client.post("/admin/login", json={"user": "admin", "pass": "admin"})
    assert r.status_code == 200
    assert r.json()["data"] == {"authenticated": True, "login_error": False}

    client.post("/admin/logout")
    assert client.get("/admin/status").json()["data"]["authenticated"] is False


@pytest.mark.parametrize(
    "method, path, kwargs",
    [
        ("post", "/admin/spots", {"json": {"name": "X", "category": "Bares", "neighborhood": "Urca"}}),
        ("delete", "/admin/spots/1", {}),
        ("get", "/admin/draft", {}),
        ("post", "/admin/draft/images/url", {"json": {"url": "https://example.com/a.jpg"}}),
        ("post", "/admin/neighborhoods", {"json": {"name": "Gávea"}}),
        ("delete", "/admin/categories/Bares", {}),
        ("put", "/admin/labels", {"json": {"categories": "Tipos"}}),
    ],
)
def test_admin_endpoints_require_login(client, method, path, kwargs):
    r = getattr(client, method)(path, **kwargs)
    assert r.status_code == 401
    assert r.json()["error_code"] == "NOT_AUTHENTICATED"


def test_create_spot_flow(admin_client, translator):
    admin_client.put("/guide/language", json={"language": "en"})
    admin_client.put("/guide/language", json={"language": "pt"})

    r = admin_client.post("/admin/draft/images/url", json={"url": "https://example.com/urca.jpg"})
    assert len(r.json()["data"]["images"]) == 2

    r = admin_client.post(
        "/admin/spots",
        json={"name": "Bar Urca", "description": "Pastel e chope", "category": "Bares", "neighborhood": "Urca"},
    )
    assert r.status_code == 201, r.text
    spot = r.json()["data"]
    assert spot["images"][1] == "https://example.com/urca.jpg"
    assert spot["rating"] == 5

    guide = admin_client.get("/guide").json()["data"]
    assert guide["spots"][0]["id"] == spot["id"]
    assert guide["total_results"] == 5
    assert admin_client.get("/admin/draft").json()["data"]["images"] == ["https://picsum.photos/seed/rio/800/600"]

    admin_client.put("/guide/language", json={"language": "en"})
    assert translator.calls[-1][1] == 5
    assert len(translator.calls) == 2


def test_spot_without_image_is_rejected(admin_client):
    admin_client.delete("/admin/draft/images/0")

    r = admin_client.post("/admin/spots", json={"name": "Sem foto", "category": "Bares", "neighborhood": "Urca"})

    assert r.status_code == 400
    assert r.json()["error_code"] == "MISSING_IMAGE"
    assert r.json()["message"] == "Adicione pelo menos uma imagem."
    assert admin_client.get("/guide").json()["data"]["total_results"] == 4


def test_image_limit(admin_client):
    for i in range(4):
        r = admin_client.post("/admin/draft/images/url", json={"url": f"https://example.com/{i}.jpg"})
        assert r.status_code == 200

    r = admin_client.post("/admin/draft/images/url", json={"url": "https://example.com/extra.jpg"})
    assert r.status_code == 400
    assert r.json()["error_code"] == "IMAGE_LIMIT_REACHED"

    r = admin_client.delete("/admin/draft/images/9")
    assert r.json()["error_code"] == "IMAGE_INDEX_OUT_OF_RANGE"


def test_image_upload(admin_client, png_bytes):
    r = admin_client.post(
        "/admin/draft/images/upload",
        files={"file": ("photo.png", png_bytes, "image/png")},
    )
    assert r.status_code == 200, r.text
    assert r.json()["data"]["images"][-1].startswith("data:image/png;base64,")

    r = admin_client.post(
        "/admin/draft/images/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )
    assert r.status_code == 400
    assert r.json()["error_code"] == "INVALID_IMAGE"


def test_delete_spot(admin_client):
    r = admin_client.delete("/admin/spots/2")
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Aprazível"

    r = admin_client.delete("/admin/spots/2")
    assert r.status_code == 404
    assert r.json()["error_code"] == "SPOT_NOT_FOUND"


def test_neighborhoods(admin_client):
    r = admin_client.post("/admin/neighborhoods", json={"name": "Gávea"})
    assert r.status_code == 201
    assert r.json()["data"][-1] == "Gávea"

    assert admin_client.post("/admin/neighborhoods", json={"name": "Gávea"}).json()["error_code"] == "DUPLICATE_NEIGHBORHOOD"
    assert admin_client.post("/admin/neighborhoods", json={"name": ""}).json()["error_code"] == "INVALID_NEIGHBORHOOD"

    r = admin_client.delete("/admin/neighborhoods/Gávea")
    assert "Gávea" not in r.json()["data"]


def test_categories(admin_client, png_bytes):
    r = admin_client.post("/admin/categories/icon", files={"file": ("icon.png", png_bytes, "image/png")})
    icon = r.json()["data"]["icon"]
    assert icon.startswith("data:image/png")

    r = admin_client.post("/admin/categories", json={"name": "Cafés", "icon": icon})
    assert r.status_code == 201
    assert r.json()["data"]["color"] == "#3b82f6"

    r = admin_client.post("/admin/categories", json={"name": "Sem ícone"})
    assert r.status_code == 400
    assert r.json()["details"] == {"missing_fields": ["icon"]}

    categories = admin_client.get("/guide").json()["data"]["categories"]
    assert categories[-1]["icon_is_image"] is True

    r = admin_client.delete("/admin/categories/Cafés")
    assert all(c["name"] != "Cafés" for c in r.json()["data"])


def test_labels(admin_client):
    r = admin_client.put("/admin/labels", json={"categories": "Tipos"})
    assert r.json()["data"] == {"categories": "Tipos", "neighborhoods": "Bairros"}
    assert admin_client.get("/guide").json()["data"]["labels"]["categories"] == "Tipos"
