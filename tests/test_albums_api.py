from __future__ import annotations

import json
from typing import TYPE_CHECKING

from .conftest import BLUE_TRAIN_ID, JERU_ID

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


def test_health_check(client: TestClient) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "service": "album-api", "version": "1.0.0"}


def test_list_albums(client: TestClient) -> None:
    resp = client.get("/albums")
    assert resp.status_code == 200
    albums = resp.json()
    assert [album["title"] for album in albums] == [
        "Blue Train",
        "Jeru",
        "Sarah Vaughan and Clifford Brown",
    ]
    assert albums[0] == {"id": BLUE_TRAIN_ID, "title": "Blue Train", "artist": "John Coltrane", "price": 56.99}


def test_responses_are_indented(client: TestClient) -> None:
    resp = client.get(f"/albums/{BLUE_TRAIN_ID}")
    assert resp.text.startswith('{\n    "id": ')
    assert resp.headers["content-type"].startswith("application/json")


def test_get_album(client: TestClient) -> None:
    resp = client.get(f"/albums/{BLUE_TRAIN_ID}")
    assert resp.status_code == 200
    assert resp.json()["price"] == 56.99


def test_get_album_not_found(client: TestClient) -> None:
    resp = client.get("/albums/not-found")
    assert resp.status_code == 404
    assert resp.json() == {"message": "album not found"}


def test_create_album(client: TestClient, kind_of_blue: dict) -> None:
    resp = client.post("/albums", json={**kind_of_blue, "id": "client-chosen"})
    assert resp.status_code == 201
    album = resp.json()
    assert album["id"] and album["id"] != "client-chosen"
    assert {k: album[k] for k in ("title", "artist", "price")} == kind_of_blue

    fetched = client.get(f"/albums/{album['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == album
    assert len(client.get("/albums").json()) == 4


def test_create_album_accepts_integer_price(client: TestClient) -> None:
    resp = client.post("/albums", json={"title": "Giant Steps", "artist": "John Coltrane", "price": 20})
    assert resp.status_code == 201
    assert resp.json()["price"] == 20


def test_create_album_invalid_fields(client: TestClient) -> None:
    resp = client.post("/albums", json={"title": "A"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Title must be between 2 and 100 characters"}
    assert len(client.get("/albums").json()) == 3


def test_create_album_missing_price(client: TestClient) -> None:
    resp = client.post("/albums", json={"title": "Kind of Blue", "artist": "Miles Davis"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Price is required and must be greater than 0"}


def test_create_album_malformed_json(client: TestClient) -> None:
    resp = client.post("/albums", content=b'{"title": ', headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Invalid JSON"
    assert body["details"]


def test_create_album_price_as_string_is_a_decode_error(client: TestClient) -> None:
    resp = client.post("/albums", json={"title": "Kind of Blue", "artist": "Miles Davis", "price": "49.99"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid JSON"
    assert "price" in resp.json()["details"]


def test_create_album_non_object_body(client: TestClient) -> None:
    resp = client.post("/albums", json=["Kind of Blue"])
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid JSON"


def test_delete_album(client: TestClient) -> None:
    resp = client.delete(f"/albums/{BLUE_TRAIN_ID}")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Blue Train"
    assert len(client.get("/albums").json()) == 2
    assert client.get(f"/albums/{BLUE_TRAIN_ID}").status_code == 404
    assert client.delete(f"/albums/{BLUE_TRAIN_ID}").status_code == 404


def test_patch_album(client: TestClient) -> None:
    resp = client.patch(f"/albums/{JERU_ID}", json={"title": "Updated Title", "id": "other"})
    assert resp.status_code == 200
    assert resp.json() == {"id": JERU_ID, "title": "Updated Title", "artist": "Gerry Mulligan", "price": 17.99}
    assert client.get(f"/albums/{JERU_ID}").json()["title"] == "Updated Title"


def test_patch_album_empty_body_is_a_no_op(client: TestClient) -> None:
    before = client.get(f"/albums/{JERU_ID}").json()
    resp = client.patch(f"/albums/{JERU_ID}", json={})
    assert resp.status_code == 200
    assert resp.json() == before


def test_patch_album_invalid_title(client: TestClient) -> None:
    resp = client.patch(f"/albums/{JERU_ID}", json={"title": "A", "price": 99.0})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Title must be between 2 and 100 characters"}
    album = client.get(f"/albums/{JERU_ID}").json()
    assert (album["title"], album["artist"], album["price"]) == ("Jeru", "Gerry Mulligan", 17.99)


def test_patch_album_not_found(client: TestClient) -> None:
    resp = client.patch("/albums/not-found", json={"title": "Updated Title"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "album not found"}


def test_patch_album_malformed_json(client: TestClient) -> None:
    resp = client.patch(f"/albums/{JERU_ID}", content=b"not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid JSON"


def test_walkthrough(client: TestClient, kind_of_blue: dict) -> None:
    created = client.post("/albums", json=kind_of_blue)
    assert created.status_code == 201
    assert client.post("/albums", json={"title": "A"}).status_code == 400

    assert client.delete(f"/albums/{BLUE_TRAIN_ID}").status_code == 200
    assert client.get(f"/albums/{BLUE_TRAIN_ID}").status_code == 404

    patched = client.patch(f"/albums/{JERU_ID}", json={"title": "Updated Title"})
    assert patched.status_code == 200
    assert patched.json()["id"] == JERU_ID

    titles = [album["title"] for album in client.get("/albums").json()]
    assert titles == ["Updated Title", "Sarah Vaughan and Clifford Brown", "Kind of Blue"]


def test_create_album_body_not_utf8(client: TestClient) -> None:
    resp = client.post(
        "/albums",
        content=b'{"title":"\xff\xfe","artist":"Miles Davis","price":4}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Invalid JSON"
    assert "UTF-8" in body["details"]
    assert len(client.get("/albums").json()) == 3


def test_create_album_without_content_type(client: TestClient, kind_of_blue: dict) -> None:
    resp = client.post("/albums", content=json.dumps(kind_of_blue).encode("utf-8"))
    assert resp.status_code == 201
    assert resp.json()["title"] == "Kind of Blue"


def test_create_album_form_content_type(client: TestClient, kind_of_blue: dict) -> None:
    resp = client.post(
        "/albums",
        content=json.dumps(kind_of_blue).encode("utf-8"),
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert resp.status_code == 201


def test_patch_album_without_content_type(client: TestClient) -> None:
    resp = client.patch(f"/albums/{JERU_ID}", content=b'{"price": 21.5}')
    assert resp.status_code == 200
    assert resp.json()["price"] == 21.5


def test_create_album_empty_body(client: TestClient) -> None:
    resp = client.post("/albums", content=b"")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid JSON"


def test_create_album_null_body_fails_required_fields(client: TestClient) -> None:
    resp = client.post("/albums", content=b"null", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Title is required"}


def test_patch_album_null_body_is_a_no_op(client: TestClient) -> None:
    before = client.get(f"/albums/{JERU_ID}").json()
    resp = client.patch(f"/albums/{JERU_ID}", content=b"null", headers={"Content-Type": "application/json"})
    assert resp.status_code == 200
    assert resp.json() == before


def test_openapi_documents_json_bodies(client: TestClient) -> None:
    paths = client.get("/openapi.json").json()["paths"]
    post_schema = paths["/albums"]["post"]["requestBody"]["content"]["application/json"]["schema"]
    assert set(post_schema["properties"]) == {"title", "artist", "price"}
    assert "requestBody" in paths["/albums/{album_id}"]["patch"]
