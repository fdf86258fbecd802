"""
Acme Stores Backend: /stores Endpoint Tests
============================================

What:  End-to-end HTTP tests through the full middleware and handler stack.
How:   httpx AsyncClient over ASGITransport; the database is in-memory SQLite.

Checks status codes, the uniform {status, message} error body, the
Location header, and merge-patch behaviour across requests.
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest

from app.exceptions import UNEXPECTED_ERROR_MESSAGE, DatabaseError


def assert_error(response, status, message):
    assert response.status_code == status
    assert response.json() == {"status": status, "message": message}


class TestGetStoreById:

    @pytest.mark.asyncio
    async def test_existing_store(self, test_client, seed_stores):
        store = seed_stores["aracaju"]
        response = await test_client.get(f"/stores/{store.id}")

        assert response.status_code == 200
        assert response.json() == {
            "id": str(store.id),
            "name": "Aracaju",
            "address": "Rua Laranjeiras, Centro, Aracaju/SE",
        }

    @pytest.mark.asyncio
    async def test_malformed_id_is_400_even_if_similar_id_exists(self, test_client, seed_stores):
        prefix = str(seed_stores["aracaju"].id)[:8]
        for bad_id in ("00acc00e", prefix):
            response = await test_client.get(f"/stores/{bad_id}")
            assert_error(response, 400, "id is not valid")

    @pytest.mark.asyncio
    async def test_undashed_uuid_is_400(self, test_client, seed_stores):
        response = await test_client.get(f"/stores/{seed_stores['aracaju'].id.hex}")
        assert_error(response, 400, "id is not valid")

    @pytest.mark.asyncio
    async def test_unknown_uuid_is_404(self, test_client, seed_stores):
        response = await test_client.get(f"/stores/{uuid.uuid4()}")
        assert_error(response, 404, "no Store found for id")


class TestSearchStores:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("term", ["acaj", "Aracaju"])
    async def test_search_by_name(self, test_client, seed_stores, term):
        response = await test_client.get("/stores", params={"name": term})

        assert response.status_code == 200
        assert [s["name"] for s in response.json()] == ["Aracaju"]

    @pytest.mark.asyncio
    async def test_search_by_address(self, test_client, seed_stores):
        response = await test_client.get("/stores", params={"address": "BEIRA MAR"})

        assert response.status_code == 200
        assert [s["name"] for s in response.json()] == ["Vitoria"]

    @pytest.mark.asyncio
    async def test_search_by_both_returns_union(self, test_client, seed_stores):
        response = await test_client.get(
            "/stores", params={"name": "Aracaju", "address": "Recife/PE"}
        )

        assert response.status_code == 200
        assert {s["name"] for s in response.json()} == {"Aracaju", "Recife Antigo"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{}, {"name": ""}, {"name": "", "address": ""}])
    async def test_search_without_parameters(self, test_client, seed_stores, params):
        response = await test_client.get("/stores", params=params)
        assert_error(
            response, 400,
            "no valid parameter informed; accepted parameters are name and address",
        )

    @pytest.mark.asyncio
    async def test_search_no_match(self, test_client, seed_stores):
        response = await test_client.get("/stores", params={"name": "Manaus"})
        assert_error(response, 404, "no Store found for parameters Name/Address")


class TestCreateStore:

    @pytest.mark.asyncio
    async def test_create_store(self, test_client):
        response = await test_client.post(
            "/stores", json={"name": "Vitoria", "address": "Centro, Vitoria/ES"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Vitoria"
        assert body["address"] == "Centro, Vitoria/ES"
        assert uuid.UUID(body["id"])
        assert response.headers["location"] == f"http://test/stores/{body['id']}"

    @pytest.mark.asyncio
    async def test_created_store_can_be_fetched(self, test_client):
        created = await test_client.post("/stores", json={"name": "Natal", "address": "Ponta Negra"})

        response = await test_client.get(created.headers["location"])

        assert response.status_code == 200
        assert response.json() == created.json()

    @pytest.mark.asyncio
    async def test_client_supplied_id_is_ignored(self, test_client, seed_stores):
        existing = seed_stores["aracaju"]
        response = await test_client.post(
            "/stores",
            json={"id": str(existing.id), "name": "Hijack", "address": "Somewhere"},
        )

        assert response.status_code == 201
        assert response.json()["id"] != str(existing.id)

        # The existing store was not overwritten
        original = await test_client.get(f"/stores/{existing.id}")
        assert original.json()["name"] == "Aracaju"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"name": "Vitoria"},
            {"address": "Centro"},
            {"name": "Vitoria", "address": ""},
            {"name": None, "address": "Centro"},
        ],
    )
    async def test_missing_fields(self, test_client, payload):
        response = await test_client.post("/stores", json=payload)
        assert_error(response, 400, "name and address fields are required")

    @pytest.mark.asyncio
    async def test_missing_body(self, test_client):
        response = await test_client.post("/stores")
        assert_error(response, 400, "information incomplete or malformed")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"name": 5, "address": "Centro"}, {"name": "Vitoria", "address": ["Centro"]}],
    )
    async def test_wrong_field_types(self, test_client, payload):
        response = await test_client.post("/stores", json=payload)
        assert_error(response, 400, "information incomplete or malformed")

    @pytest.mark.asyncio
    async def test_name_longer_than_column(self, test_client):
        response = await test_client.post(
            "/stores", json={"name": "x" * 256, "address": "Centro"}
        )
        assert_error(response, 400, "information incomplete or malformed")

    @pytest.mark.asyncio
    async def test_name_at_column_limit(self, test_client):
        response = await test_client.post(
            "/stores", json={"name": "x" * 255, "address": "Centro"}
        )
        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_unparseable_body(self, test_client):
        response = await test_client.post(
            "/stores",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert_error(response, 400, "information incomplete or malformed")


class TestUpdateStore:

    @pytest.mark.asyncio
    async def test_update_name_only(self, test_client, seed_stores):
        store = seed_stores["aracaju"]
        response = await test_client.put(f"/stores/{store.id}", json={"name": "Aracaju Shopping"})

        assert response.status_code == 200
        assert response.json() == {
            "id": str(store.id),
            "name": "Aracaju Shopping",
            "address": "Rua Laranjeiras, Centro, Aracaju/SE",
        }

        fetched = await test_client.get(f"/stores/{store.id}")
        assert fetched.json()["name"] == "Aracaju Shopping"
        assert fetched.json()["address"] == "Rua Laranjeiras, Centro, Aracaju/SE"

    @pytest.mark.asyncio
    async def test_update_address_only(self, test_client, seed_stores):
        store = seed_stores["vitoria"]
        response = await test_client.put(f"/stores/{store.id}", json={"address": "Jardim Camburi"})

        assert response.status_code == 200
        assert response.json()["name"] == "Vitoria"
        assert response.json()["address"] == "Jardim Camburi"

    @pytest.mark.asyncio
    async def test_repeated_update_is_idempotent(self, test_client, seed_stores):
        store = seed_stores["recife"]
        payload = {"name": "Recife Novo", "address": "Boa Viagem"}

        first = await test_client.put(f"/stores/{store.id}", json=payload)
        second = await test_client.put(f"/stores/{store.id}", json=payload)

        assert first.status_code == second.status_code == 200
        assert first.json() == second.json()

    @pytest.mark.asyncio
    async def test_both_fields_blank(self, test_client, seed_stores):
        store = seed_stores["aracaju"]
        response = await test_client.put(f"/stores/{store.id}", json={"name": "", "address": " "})
        assert_error(response, 400, "at least one field required to update")

    @pytest.mark.asyncio
    async def test_malformed_id(self, test_client, seed_stores):
        response = await test_client.put("/stores/00acc00e", json={"name": "x"})
        assert_error(response, 400, "id not valid")

    @pytest.mark.asyncio
    async def test_unknown_uuid(self, test_client, seed_stores):
        response = await test_client.put(f"/stores/{uuid.uuid4()}", json={"name": "x"})
        assert_error(response, 404, "no Store found for id")

    @pytest.mark.asyncio
    async def test_undashed_id(self, test_client, seed_stores):
        response = await test_client.put(
            f"/stores/{seed_stores['aracaju'].id.hex}", json={"name": "x"}
        )
        assert_error(response, 400, "id not valid")

    @pytest.mark.asyncio
    async def test_address_longer_than_column(self, test_client, seed_stores):
        response = await test_client.put(
            f"/stores/{seed_stores['aracaju'].id}", json={"address": "a" * 300}
        )
        assert_error(response, 400, "information incomplete or malformed")

    @pytest.mark.asyncio
    async def test_missing_body(self, test_client, seed_stores):
        response = await test_client.put(f"/stores/{seed_stores['aracaju'].id}")
        assert_error(response, 400, "information incomplete or malformed")

    @pytest.mark.asyncio
    async def test_missing_id(self, test_client, seed_stores):
        response = await test_client.put("/stores", json={"name": "x"})
        assert_error(response, 400, "id is required")

    @pytest.mark.asyncio
    async def test_body_id_does_not_redirect_update(self, test_client, seed_stores):
        target = seed_stores["aracaju"]
        other = seed_stores["vitoria"]
        response = await test_client.put(
            f"/stores/{target.id}", json={"id": str(other.id), "name": "Renamed"}
        )

        assert response.status_code == 200
        assert response.json()["id"] == str(target.id)
        untouched = await test_client.get(f"/stores/{other.id}")
        assert untouched.json()["name"] == "Vitoria"


class TestServerErrors:
    """500 bodies stay generic; internal detail only reaches the log."""

    @pytest.mark.asyncio
    async def test_database_error_body_is_generic(self, test_client):
        failure = DatabaseError(
            message="relation stores does not exist",
            context={"dsn": "postgresql://acme:acme_secret@db/acme_stores"},
        )
        with patch("app.services.store_service.store_repository") as mock_repo:
            mock_repo.find_by_id = AsyncMock(side_effect=failure)

            response = await test_client.get(f"/stores/{uuid.uuid4()}")

        assert_error(response, 500, "An internal error occurred. Please try again later.")
        assert "acme_secret" not in response.text
        assert response.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_unexpected_error_body_is_generic(self, test_client):
        with patch("app.services.store_service.store_repository") as mock_repo:
            mock_repo.find_by_filter = AsyncMock(side_effect=RuntimeError("stack detail"))

            response = await test_client.get(
                "/stores", params={"name": "Aracaju"}, headers={"X-Request-ID": "oops-7"}
            )

        assert_error(response, 500, UNEXPECTED_ERROR_MESSAGE)
        assert "stack detail" not in response.text
        assert response.headers["x-request-id"] == "oops-7"


class TestResponseHeaders:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client, seed_stores):
        response = await test_client.get(f"/stores/{seed_stores['aracaju'].id}")
        assert response.headers.get("x-request-id")

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/stores/00acc00e", headers={"X-Request-ID": "trace-42"})
        assert response.status_code == 400
        assert response.headers["x-request-id"] == "trace-42"
