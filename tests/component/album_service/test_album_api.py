"""
Album Service API Component Tests

Tests FastAPI endpoints against the real app and in-memory store.
Uses TestClient for API testing - no network.

Usage:
    pytest tests/component/album_service/test_album_api.py -v
"""
import pytest
from fastapi.testclient import TestClient

from microservices.album_service.main import app
from tests.fixtures import make_album_create_request, make_album_update_request

pytestmark = [pytest.mark.component]


# ============================================================================
# Service Endpoints
# ============================================================================

class TestServiceEndpoints:
    """GET /, /health, /info"""

    def test_root_greeting(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "hello Album Service world!"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "album_service"
        assert data["album_count"] == 2
        assert "timestamp" in data

    def test_info_lists_routes(self, client):
        response = client.get("/info")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "album_service"
        assert "album_crud" in data["capabilities"]
        paths = [route["path"] for route in data["routes"]]
        assert "/albums" in paths
        assert "/albums/{album_id}" in paths

    def test_restart_gets_a_fresh_store(self, sample_create_request):
        with TestClient(app) as first:
            first.post("/albums", json=sample_create_request)
            first.delete("/albums/10")

        with TestClient(app) as fresh:
            ids = [album["albumId"] for album in fresh.get("/albums").json()]
        assert ids == [10, 11]


# ============================================================================
# GET /albums
# ============================================================================

class TestListAlbumsEndpoint:
    """GET /albums?artistName="""

    def test_list_all(self, client):
        response = client.get("/albums")

        assert response.status_code == 200
        albums = response.json()
        assert [album["albumId"] for album in albums] == [10, 11]
        assert albums[0]["artistName"] == "Beyoncé"

    def test_filter_by_artist(self, client):
        response = client.get("/albums", params={"artistName": "Billy Joel"})

        assert response.status_code == 200
        assert [album["albumId"] for album in response.json()] == [11]

    def test_filter_is_case_sensitive(self, client):
        response = client.get("/albums", params={"artistName": "billy joel"})
        assert response.status_code == 404

    def test_filter_without_matches(self, client):
        response = client.get("/albums", params={"artistName": "Nobody"})
        assert response.status_code == 404

    def test_empty_filter_lists_all(self, client):
        response = client.get("/albums?artistName=")

        assert response.status_code == 200
        assert len(response.json()) == 2


# ============================================================================
# GET /albums/{id}
# ============================================================================

class TestGetAlbumEndpoint:
    """GET /albums/{album_id}"""

    def test_get_album(self, client, seed_albums):
        response = client.get("/albums/10")

        assert response.status_code == 200
        assert response.json() == seed_albums[0]

    def test_get_unknown(self, client):
        assert client.get("/albums/999").status_code == 404

    @pytest.mark.parametrize("raw_id", ["abc", "x10", "-"])
    def test_get_non_integer(self, client, raw_id):
        assert client.get(f"/albums/{raw_id}").status_code == 400

    def test_leading_integer_accepted(self, client):
        response = client.get("/albums/11abc")

        assert response.status_code == 200
        assert response.json()["albumId"] == 11

    def test_hex_id_accepted(self, client):
        response = client.get("/albums/0x0B")

        assert response.status_code == 200
        assert response.json()["albumId"] == 11


# ============================================================================
# POST /albums
# ============================================================================

class TestCreateAlbumEndpoint:
    """POST /albums"""

    def test_reference_scenario(self, client, sample_create_request):
        response = client.post("/albums", json=sample_create_request)

        assert response.status_code == 200
        albums = response.json()
        assert len(albums) == 3
        assert albums[-1]["albumId"] == 12
        assert albums[-1]["artistName"] == "X"

    def test_created_album_is_fetchable(self, client):
        body = make_album_create_request(url="https://example.com/embed")
        client.post("/albums", json=body)

        response = client.get("/albums/12")
        assert response.status_code == 200
        assert response.json() == {"albumId": 12, **body}

    def test_missing_compulsory_field(self, client):
        body = make_album_create_request()
        del body["artistName"]

        response = client.post("/albums", json=body)

        assert response.status_code == 401
        assert response.json()["detail"] == "Not all compulsory fields supplied"
        assert len(client.get("/albums").json()) == 2

    def test_missing_body(self, client):
        assert client.post("/albums").status_code == 401

    def test_empty_object_body(self, client):
        assert client.post("/albums", json={}).status_code == 401

    def test_empty_string_field_not_stored(self, client):
        body = make_album_create_request(collection_name="")

        response = client.post("/albums", json=body)

        assert response.status_code == 200
        assert "collectionName" not in response.json()[-1]

    def test_wrong_value_type_gets_validation_status(self, client):
        body = make_album_create_request()
        body["artistName"] = 42

        response = client.post("/albums", json=body)

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid album fields: artistName"
        assert len(client.get("/albums").json()) == 2

    @pytest.mark.parametrize("body", [[], ["artistName"], "album", 12])
    def test_non_object_body(self, client, body):
        assert client.post("/albums", json=body).status_code == 401

    def test_validation_status_configurable(self, strict_client):
        response = strict_client.post("/albums", json={"artistName": "Only"})
        assert response.status_code == 422


# ============================================================================
# PUT /albums/{id}
# ============================================================================

class TestUpdateAlbumEndpoint:
    """PUT /albums/{album_id}"""

    def test_update_returns_original_and_updated(self, client, seed_albums):
        body = make_album_update_request(seed_albums[0], artistName="B")

        response = client.put("/albums/10", json=body)

        assert response.status_code == 200
        original, updated = response.json()
        assert original == seed_albums[0]
        assert updated == {**seed_albums[0], "artistName": "B"}

    def test_update_is_visible(self, client, seed_albums):
        body = make_album_update_request(seed_albums[1], releaseDate="1977-09-29T00:00:00Z")
        client.put("/albums/11", json=body)

        assert client.get("/albums/11").json()["releaseDate"] == "1977-09-29T00:00:00Z"

    def test_update_unknown(self, client):
        response = client.put("/albums/999", json=make_album_update_request())
        assert response.status_code == 404

    def test_update_non_integer(self, client):
        response = client.put("/albums/abc", json=make_album_update_request())
        assert response.status_code == 400

    def test_update_empty_compulsory_field(self, client, seed_albums):
        body = make_album_update_request(seed_albums[0], primaryGenreName="")

        response = client.put("/albums/10", json=body)

        assert response.status_code == 401
        assert client.get("/albums/10").json() == seed_albums[0]

    def test_update_mistyped_body_non_integer_id(self, client):
        body = make_album_update_request(artistName=42)
        assert client.put("/albums/abc", json=body).status_code == 400

    def test_update_mistyped_body_unknown_id(self, client):
        body = make_album_update_request(artistName=42)
        assert client.put("/albums/999", json=body).status_code == 404

    def test_update_mistyped_body_known_id(self, client, seed_albums):
        body = make_album_update_request(seed_albums[0], artistName=42)

        response = client.put("/albums/10", json=body)

        assert response.status_code == 401
        assert client.get("/albums/10").json() == seed_albums[0]

    def test_update_non_object_body(self, client):
        assert client.put("/albums/10", json=[]).status_code == 401

    def test_update_missing_body(self, client):
        assert client.put("/albums/10").status_code == 401

    def test_update_validation_status_configurable(self, strict_client):
        assert strict_client.put("/albums/10", json={}).status_code == 422

    def test_update_keeps_album_id(self, client, seed_albums):
        body = make_album_update_request(seed_albums[0], albumId=50)

        _, updated = client.put("/albums/10", json=body).json()

        assert updated["albumId"] == 10
        assert client.get("/albums/50").status_code == 404


# ============================================================================
# DELETE /albums/{id}
# ============================================================================

class TestDeleteAlbumEndpoint:
    """DELETE /albums/{album_id}"""

    def test_delete_then_get(self, client, seed_albums):
        response = client.delete("/albums/11")

        assert response.status_code == 200
        assert response.json() == seed_albums[1]
        assert client.get("/albums/11").status_code == 404

    def test_delete_unknown(self, client):
        assert client.delete("/albums/999").status_code == 404

    def test_delete_non_integer(self, client):
        assert client.delete("/albums/abc").status_code == 400

    def test_delete_twice(self, client):
        assert client.delete("/albums/10").status_code == 200
        assert client.delete("/albums/10").status_code == 404
