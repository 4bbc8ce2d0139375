"""
Villa endpoints: envelope shape, admin-only mutations, validation and
not-found handling.
"""

import pytest

from tests.conftest import create_villa
from villa_api.repository.villa_repository import VillaRepository

VILLAS_URL = "/api/v1/villas"


class TestReadVillas:
    def test_list_is_public_and_wrapped_in_envelope(self, api_client, admin_headers):
        create_villa(api_client, admin_headers)

        response = api_client.get(VILLAS_URL)

        assert response.status_code == 200
        body = response.json()
        assert body["is_success"] is True
        assert body["status_code"] == 200
        assert body["error_messages"] == []
        assert [v["name"] for v in body["result"]] == ["Lake House"]

    def test_get_one(self, api_client, admin_headers):
        villa = create_villa(api_client, admin_headers)

        body = api_client.get(f"{VILLAS_URL}/{villa['id']}").json()

        assert body["result"]["name"] == "Lake House"
        assert body["result"]["capacity"] == 4

    def test_missing_villa_is_404(self, api_client):
        response = api_client.get(f"{VILLAS_URL}/42")
        assert response.status_code == 404
        body = response.json()
        assert body["is_success"] is False
        assert body["error_messages"] == ["Villa not found"]

    def test_zero_id_is_bad_request(self, api_client):
        assert api_client.get(f"{VILLAS_URL}/0").status_code == 400

    def test_filters(self, api_client, admin_headers):
        create_villa(api_client, admin_headers, name="Small", capacity=2)
        create_villa(api_client, admin_headers, name="Large", capacity=8)

        by_capacity = api_client.get(VILLAS_URL, params={"capacity": 8}).json()["result"]
        by_name = api_client.get(VILLAS_URL, params={"search": "sma"}).json()["result"]

        assert [v["name"] for v in by_capacity] == ["Large"]
        assert [v["name"] for v in by_name] == ["Small"]


class TestCreateVilla:
    def test_create_returns_201(self, api_client, admin_headers):
        response = api_client.post(VILLAS_URL, json={"name": "Lake House", "capacity": 4}, headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["status_code"] == 201
        assert body["result"]["id"] > 0
        assert body["result"]["rate"] == 0

    def test_requires_token(self, api_client):
        response = api_client.post(VILLAS_URL, json={"name": "Lake House"})
        assert response.status_code == 401
        assert response.json()["is_success"] is False

    def test_customer_is_forbidden(self, api_client, customer_headers):
        response = api_client.post(VILLAS_URL, json={"name": "Lake House"}, headers=customer_headers)
        assert response.status_code == 403
        assert response.json()["error_messages"] == ["Admin access required"]

    def test_invalid_token_is_unauthorized(self, api_client):
        response = api_client.post(
            VILLAS_URL, json={"name": "Lake House"}, headers={"Authorization": "Bearer nonsense"}
        )
        assert response.status_code == 401

    def test_duplicate_name_is_rejected(self, api_client, admin_headers):
        create_villa(api_client, admin_headers)
        response = api_client.post(VILLAS_URL, json={"name": "lake house"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["error_messages"] == ["Villa already Exists!"]

    def test_name_taken_by_concurrent_create_is_a_conflict(self, api_client, admin_headers, monkeypatch):
        create_villa(api_client, admin_headers)
        # The other request committed after this one checked the name
        monkeypatch.setattr(VillaRepository, "get_by_name", lambda self, name: None)

        response = api_client.post(VILLAS_URL, json={"name": "Lake House"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error_messages"] == ["Villa already Exists!"]

    def test_missing_name_is_a_validation_failure(self, api_client, admin_headers):
        response = api_client.post(VILLAS_URL, json={"capacity": 4}, headers=admin_headers)
        assert response.status_code == 400
        body = response.json()
        assert body["is_success"] is False
        assert any(message.startswith("name") for message in body["error_messages"])

    def test_name_longer_than_30_is_rejected(self, api_client, admin_headers):
        response = api_client.post(VILLAS_URL, json={"name": "x" * 31}, headers=admin_headers)
        assert response.status_code == 400


class TestUpdateVilla:
    def test_put_replaces_fields(self, api_client, admin_headers):
        villa = create_villa(api_client, admin_headers)
        payload = {"id": villa["id"], "name": "Lake House", "capacity": 6, "rate": 199.5, "amenity": "Dock"}

        response = api_client.put(f"{VILLAS_URL}/{villa['id']}", json=payload, headers=admin_headers)

        assert response.status_code == 200
        updated = api_client.get(f"{VILLAS_URL}/{villa['id']}").json()["result"]
        assert updated["capacity"] == 6
        assert updated["rate"] == 199.5
        assert updated["amenity"] == "Dock"

    def test_put_with_mismatched_id_is_rejected(self, api_client, admin_headers):
        villa = create_villa(api_client, admin_headers)
        payload = {"id": villa["id"] + 1, "name": "Lake House"}
        response = api_client.put(f"{VILLAS_URL}/{villa['id']}", json=payload, headers=admin_headers)
        assert response.status_code == 400

    def test_put_missing_villa_is_404(self, api_client, admin_headers):
        response = api_client.put(f"{VILLAS_URL}/7", json={"id": 7, "name": "Ghost"}, headers=admin_headers)
        assert response.status_code == 404

    def test_patch_only_touches_sent_fields(self, api_client, admin_headers):
        villa = create_villa(api_client, admin_headers, details="Quiet")

        response = api_client.patch(f"{VILLAS_URL}/{villa['id']}", json={"rate": 99}, headers=admin_headers)

        result = response.json()["result"]
        assert result["rate"] == 99
        assert result["details"] == "Quiet"
        assert result["name"] == "Lake House"

    def test_rename_onto_existing_name_is_rejected(self, api_client, admin_headers):
        create_villa(api_client, admin_headers, name="Taken")
        villa = create_villa(api_client, admin_headers)
        response = api_client.patch(f"{VILLAS_URL}/{villa['id']}", json={"name": "Taken"}, headers=admin_headers)
        assert response.status_code == 400


class TestDeleteVilla:
    def test_delete(self, api_client, admin_headers):
        villa = create_villa(api_client, admin_headers)

        response = api_client.delete(f"{VILLAS_URL}/{villa['id']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["status_code"] == 204
        assert api_client.get(f"{VILLAS_URL}/{villa['id']}").status_code == 404

    def test_delete_requires_admin(self, api_client, admin_headers, customer_headers):
        villa = create_villa(api_client, admin_headers)
        response = api_client.delete(f"{VILLAS_URL}/{villa['id']}", headers=customer_headers)
        assert response.status_code == 403


class TestPatchNulls:
    @pytest.mark.parametrize("field", ["name", "rate", "sqft", "capacity"])
    def test_null_for_required_column_is_a_validation_failure(self, api_client, admin_headers, field):
        villa = create_villa(api_client, admin_headers)

        response = api_client.patch(f"{VILLAS_URL}/{villa['id']}", json={field: None}, headers=admin_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["is_success"] is False
        assert any(message.startswith(field) for message in body["error_messages"])
        assert api_client.get(f"{VILLAS_URL}/{villa['id']}").json()["result"]["name"] == "Lake House"

    def test_null_for_optional_column_clears_it(self, api_client, admin_headers):
        villa = create_villa(api_client, admin_headers, details="Quiet")

        response = api_client.patch(f"{VILLAS_URL}/{villa['id']}", json={"details": None}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["result"]["details"] is None
