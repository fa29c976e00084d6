import json

from models.db import Category, Document
from repos.availability_repos import normalize, normalize_all

ALL_DAYS = [str(day) for day in range(1, 32)]


def make_document(*category_ids):
    doc = Document.initial("admin", "Acme")
    doc.categories = [Category(id=cid, name=cid) for cid in category_ids]
    return doc


def test_normalize_fills_every_day_with_available():
    doc = make_document("cat-1")

    assert normalize(doc, "cat-1") is True
    assert doc.availability["cat-1"] == {day: True for day in range(1, 32)}


def test_normalize_keeps_explicit_values():
    doc = make_document("cat-1")
    doc.availability["cat-1"] = {3: False, 4: True}

    normalize(doc, "cat-1")

    assert doc.availability["cat-1"][3] is False
    assert len(doc.availability["cat-1"]) == 31


def test_normalize_is_idempotent():
    doc = make_document("cat-1")
    doc.availability["cat-1"] = {10: False}
    normalize(doc, "cat-1")
    once = dict(doc.availability["cat-1"])

    assert normalize(doc, "cat-1") is False
    assert doc.availability["cat-1"] == once


def test_normalize_all_covers_every_category():
    doc = make_document("cat-1", "cat-2")
    doc.availability["cat-2"] = {1: False}

    assert normalize_all(doc) is True
    assert set(doc.availability) == {"cat-1", "cat-2"}
    assert all(len(days) == 31 for days in doc.availability.values())
    assert doc.availability["cat-2"][1] is False


def test_set_single_day(client, auth_headers, category):
    url = f"/api/categories/{category['id']}/availability"
    client.put(url, json={"day": 9, "available": False}, headers=auth_headers)
    prior = client.get(url).json()

    response = client.put(url, json={"day": 5, "available": False}, headers=auth_headers)

    assert response.status_code == 200
    updated = response.json()
    assert list(updated) == ALL_DAYS
    assert updated["5"] is False
    assert {k: v for k, v in updated.items() if k != "5"} == {k: v for k, v in prior.items() if k != "5"}


def test_out_of_range_day_is_rejected(client, auth_headers, category):
    url = f"/api/categories/{category['id']}/availability"
    prior = client.get(url).json()

    for day in (32, 0, -1, 2.5, "abc", True, None):
        response = client.put(url, json={"day": day, "available": True}, headers=auth_headers)
        assert response.status_code == 400, day
        assert response.json()["error"] == "ValidationError"

    assert client.get(url).json() == prior


def test_day_given_as_string_is_accepted(client, auth_headers, category):
    url = f"/api/categories/{category['id']}/availability"

    response = client.put(url, json={"day": "7", "available": False}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["7"] is False


def test_available_flag_must_be_boolean(client, auth_headers, category):
    url = f"/api/categories/{category['id']}/availability"

    response = client.put(url, json={"day": 3, "available": "no"}, headers=auth_headers)

    assert response.status_code == 400


def test_unknown_category(client, auth_headers):
    url = "/api/categories/cat-missing/availability"

    assert client.get(url).status_code == 404
    response = client.put(url, json={"day": 1, "available": False}, headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "NotFound", "message": "Category not found"}


def test_update_requires_token(client, category):
    url = f"/api/categories/{category['id']}/availability"

    response = client.put(url, json={"day": 1, "available": False})

    assert response.status_code == 401


def test_reads_heal_partial_calendars(client, settings):
    with open(settings.DATA_PATH) as f:
        raw = json.load(f)
    raw["categories"].append({"id": "cat-old", "name": "Old", "description": ""})
    raw["availability"]["cat-old"] = {"2": False}
    with open(settings.DATA_PATH, "w") as f:
        json.dump(raw, f)

    listing = client.get("/api/categories").json()

    assert listing[0]["id"] == "cat-old"
    assert list(listing[0]["availability"]) == ALL_DAYS
    assert listing[0]["availability"]["2"] is False
    with open(settings.DATA_PATH) as f:
        assert len(json.load(f)["availability"]["cat-old"]) == 31
