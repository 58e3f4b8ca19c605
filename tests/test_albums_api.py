"""HTTP tests for the album endpoints.

Uses FastAPI's TestClient, so no network or server process is needed.
"""

import pytest
from fastapi.testclient import TestClient

from album_catalog_api.app.main import create_app
from album_catalog_api.app.schemas.album import Album
from album_catalog_api.app.services.album_service import AlbumService


SEED = [
    {"id": "1", "title": "Taylor Allderdice", "artist": "Wiz Khalifa", "price": 10.99},
    {"id": "2", "title": "The College Dropout", "artist": "Kanye West", "price": 12.99},
    {"id": "3", "title": "Blueprint", "artist": "Jay-Z", "price": 11.99},
]

NEW_ALBUM = {"id": "4", "title": "4:44", "artist": "Jay-Z", "price": 9.99}


# --- GET /albums ---

def test_list_albums(client):
    resp = client.get("/albums")
    assert resp.status_code == 200
    assert resp.json() == SEED


def test_list_albums_after_create(client):
    client.post("/albums", json=NEW_ALBUM)
    resp = client.get("/albums")
    assert resp.json() == SEED + [NEW_ALBUM]


def test_each_app_gets_its_own_catalog():
    with TestClient(create_app()) as first, TestClient(create_app()) as second:
        first.post("/albums", json=NEW_ALBUM)
        assert len(first.get("/albums").json()) == 4
        assert len(second.get("/albums").json()) == 3


def test_injected_catalog_is_served():
    service = AlbumService([Album(**NEW_ALBUM)])
    with TestClient(create_app(service)) as c:
        assert c.get("/albums").json() == [NEW_ALBUM]


# --- GET /albums/{id} ---

def test_get_album(client):
    resp = client.get("/albums/3")
    assert resp.status_code == 200
    assert resp.json() == SEED[2]


def test_get_album_not_found(client):
    resp = client.get("/albums/42")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Album not found"}


# --- POST /albums ---

def test_create_album(client):
    resp = client.post("/albums", json=NEW_ALBUM)
    assert resp.status_code == 201
    assert resp.json() == NEW_ALBUM


def test_create_ignores_unknown_fields(client):
    resp = client.post("/albums", json={**NEW_ALBUM, "label": "Roc Nation"})
    assert resp.status_code == 201
    assert resp.json() == NEW_ALBUM


def test_create_accepts_integer_price(client):
    resp = client.post("/albums", json={**NEW_ALBUM, "price": 10})
    assert resp.status_code == 201
    assert resp.json()["price"] == 10.0


def test_create_duplicate_id_is_allowed(client):
    resp = client.post("/albums", json={**SEED[0], "title": "Rolling Papers"})
    assert resp.status_code == 201
    assert [a["id"] for a in client.get("/albums").json()] == ["1", "2", "3", "1"]
    assert client.get("/albums/1").json()["title"] == "Taylor Allderdice"


def test_create_missing_field(client):
    payload = dict(NEW_ALBUM)
    del payload["price"]
    resp = client.post("/albums", json=payload)
    assert resp.status_code == 400
    body = resp.json()
    assert body["msg"] == "Invalid album payload"
    assert ["body", "price"] in [err["loc"] for err in body["errors"]]
    assert len(client.get("/albums").json()) == 3


def test_create_malformed_json(client):
    resp = client.post("/albums", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["msg"] == "Invalid album payload"
    assert resp.json()["errors"]


@pytest.mark.parametrize("price", ["cheap", "9.99", None, [1], True])
def test_create_rejects_non_numeric_price(client, price):
    resp = client.post("/albums", json={**NEW_ALBUM, "price": price})
    assert resp.status_code == 400
    assert ["body", "price"] in [err["loc"] for err in resp.json()["errors"]]
    assert client.get("/albums").json() == SEED


@pytest.mark.parametrize("literal", [b"1e400", b"-1e400", b"NaN", b"Infinity"])
def test_create_rejects_non_finite_price(client, literal):
    body = b'{"id": "5", "title": "t", "artist": "a", "price": ' + literal + b"}"
    resp = client.post("/albums", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["msg"] == "Invalid album payload"
    assert client.get("/albums/5").status_code == 404
    assert client.get("/albums").json() == SEED


def test_update_rejects_string_price(client):
    resp = client.put("/albums/1", json={**SEED[0], "price": "1.00"})
    assert resp.status_code == 400
    assert client.get("/albums/1").json() == SEED[0]


# --- PUT /albums/{id} ---

def test_update_album(client):
    replacement = {"id": "2", "title": "Late Registration", "artist": "Kanye West", "price": 14.0}
    resp = client.put("/albums/2", json=replacement)
    assert resp.status_code == 200
    assert resp.json() == replacement
    albums = client.get("/albums").json()
    assert len(albums) == 3
    assert albums[1] == replacement


def test_update_album_with_different_id(client):
    replacement = {"id": "9", "title": "Watch the Throne", "artist": "Jay-Z", "price": 15.0}
    resp = client.put("/albums/3", json=replacement)
    assert resp.status_code == 200
    assert client.get("/albums/3").status_code == 404
    assert client.get("/albums/9").json() == replacement


def test_update_album_not_found(client):
    resp = client.put("/albums/42", json=NEW_ALBUM)
    assert resp.status_code == 404
    assert resp.content == b""
    assert client.get("/albums").json() == SEED


def test_update_album_malformed(client):
    resp = client.put("/albums/1", json={"id": "1"})
    assert resp.status_code == 400
    assert resp.json()["msg"] == "Invalid album payload"
    assert client.get("/albums/1").json() == SEED[0]


# --- DELETE /albums/{id} ---

def test_delete_album(client):
    resp = client.delete("/albums/2")
    assert resp.status_code == 204
    assert resp.content == b""
    assert [a["id"] for a in client.get("/albums").json()] == ["1", "3"]


def test_delete_album_not_found(client):
    resp = client.delete("/albums/42")
    assert resp.status_code == 404
    assert resp.content == b""
    assert client.get("/albums").json() == SEED


# --- end to end ---

def test_create_fetch_delete_scenario(client):
    resp = client.post("/albums", json=NEW_ALBUM)
    assert resp.status_code == 201
    assert resp.json() == NEW_ALBUM

    resp = client.get("/albums/4")
    assert resp.status_code == 200
    assert resp.json() == NEW_ALBUM

    resp = client.delete("/albums/4")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = client.get("/albums/4")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Album not found"}
