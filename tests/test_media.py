import os

from utils.file_upload import build_upload_name


def photo(name, content=b"\x89PNG fake"):
    return ("photos", (name, content, "image/png"))


def test_upload_name_replaces_whitespace():
    name = build_upload_name("my  red\tsaree.jpg")

    timestamp, rest = name.split("-", 1)
    assert timestamp.isdigit()
    assert rest == "my-red-saree.jpg"


def test_upload_name_drops_directories():
    assert build_upload_name("../../etc/passwd").endswith("-passwd")
    assert build_upload_name(None).endswith("-upload")


def test_photos_are_appended_in_order(client, auth_headers, product, settings):
    url = f"/api/products/{product['id']}/photos"

    first = client.post(url, files=[photo("front.png"), photo("back.png")], headers=auth_headers)

    assert first.status_code == 200
    photos = first.json()["photos"]
    assert len(photos) == 2
    assert photos[0].startswith("/uploads/") and photos[0].endswith("-front.png")
    assert photos[1].endswith("-back.png")

    second = client.post(url, files=[photo("pallu.png")], headers=auth_headers)

    assert second.status_code == 200
    assert second.json()["photos"][:2] == photos
    assert second.json()["photos"][2].endswith("-pallu.png")
    assert len(second.json()["photos"]) == 3
    assert len(os.listdir(settings.UPLOADS_DIR)) == 3


def test_uploaded_photo_is_served(client, auth_headers, product):
    url = f"/api/products/{product['id']}/photos"
    path = client.post(url, files=[photo("front.png", b"image-bytes")], headers=auth_headers).json()["photos"][0]

    response = client.get(path)

    assert response.status_code == 200
    assert response.content == b"image-bytes"


def test_too_many_photos_in_one_request(client, auth_headers, product, settings):
    url = f"/api/products/{product['id']}/photos"

    response = client.post(url, files=[photo(f"{i}.png") for i in range(6)], headers=auth_headers)

    assert response.status_code == 400
    assert client.get("/api/products").json()[0]["photos"] == []
    assert os.listdir(settings.UPLOADS_DIR) == []


def test_photos_for_unknown_product(client, auth_headers, settings):
    response = client.post("/api/products/prod-missing/photos", files=[photo("a.png")], headers=auth_headers)

    assert response.status_code == 404
    assert os.listdir(settings.UPLOADS_DIR) == []


def test_photos_require_token(client, product):
    response = client.post(f"/api/products/{product['id']}/photos", files=[photo("a.png")])

    assert response.status_code == 401


# ----- Company -----

def test_company_is_public(client):
    response = client.get("/api/company")

    assert response.status_code == 200
    assert response.json() == {"name": "Saree Availability Co.", "logoPath": ""}


def test_rename_company(client, auth_headers):
    response = client.put("/api/company", json={"name": "Handloom House"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["name"] == "Handloom House"
    assert client.get("/api/company").json()["name"] == "Handloom House"


def test_rename_company_requires_name(client, auth_headers):
    response = client.put("/api/company", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "ValidationError", "message": "Company name is required"}


def test_logo_upload_replaces_previous(client, auth_headers, settings):
    first = client.post(
        "/api/company/logo", files={"logo": ("old logo.png", b"old", "image/png")}, headers=auth_headers
    )
    second = client.post(
        "/api/company/logo", files={"logo": ("new.png", b"new", "image/png")}, headers=auth_headers
    )

    assert first.status_code == 200
    assert first.json()["logoPath"].endswith("-old-logo.png")
    assert second.json()["logoPath"].endswith("-new.png")
    assert client.get("/api/company").json()["logoPath"] == second.json()["logoPath"]
    # The previous file is kept
    assert len(os.listdir(settings.UPLOADS_DIR)) == 2


def test_logo_upload_requires_file(client, auth_headers):
    response = client.post("/api/company/logo", headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "ValidationError", "message": "Logo file is required"}
