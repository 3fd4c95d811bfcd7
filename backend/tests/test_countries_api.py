"""
Medsite Backend — Country API Tests
====================================

What:  Public listing/detail and protected create/update/delete of countries,
       including the name-uniqueness and college-reference rules.
"""

import pytest

CANADA = {"name": "Canada", "flag_image": "https://flags.example.com/ca.png", "body": "Study in Canada."}


async def _create(client, headers, **overrides):
    return await client.post("/admin/countries", json={**CANADA, **overrides}, headers=headers)


class TestCreateCountry:

    @pytest.mark.asyncio
    async def test_create_returns_201_without_body(self, test_client, auth_headers):
        response = await _create(test_client, auth_headers)
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Country created successfully"
        assert set(body["country"]) == {"id", "name", "flag_image", "created_at"}
        assert body["country"]["name"] == "Canada"

    @pytest.mark.asyncio
    async def test_duplicate_name_is_400_and_first_row_untouched(self, test_client, auth_headers):
        first = (await _create(test_client, auth_headers)).json()["country"]

        second = await _create(
            test_client, auth_headers, flag_image="other.png", body="Overwritten?"
        )
        assert second.status_code == 400
        assert second.json()["message"] == "Country with this name already exists"

        detail = (await test_client.get(f"/countries/{first['id']}")).json()["country"]
        assert detail["flag_image"] == CANADA["flag_image"]
        assert detail["body"] == CANADA["body"]
        assert len((await test_client.get("/countries")).json()["countries"]) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["name", "flag_image", "body"])
    async def test_missing_field_is_400(self, test_client, auth_headers, missing):
        response = await _create(test_client, auth_headers, **{missing: ""})
        assert response.status_code == 400
        assert response.json()["message"] == "Name, flag_image, and body are required"


class TestReadCountries:

    @pytest.mark.asyncio
    async def test_list_is_sorted_and_omits_body(self, test_client, auth_headers):
        for name in ["Georgia", "Armenia", "Canada"]:
            await _create(test_client, auth_headers, name=name)

        countries = (await test_client.get("/countries")).json()["countries"]
        assert [c["name"] for c in countries] == ["Armenia", "Canada", "Georgia"]
        assert all("body" not in c for c in countries)

    @pytest.mark.asyncio
    async def test_detail_includes_body_and_updated_at(self, test_client, auth_headers):
        created = (await _create(test_client, auth_headers)).json()["country"]
        response = await test_client.get(f"/countries/{created['id']}")
        assert response.status_code == 200
        country = response.json()["country"]
        assert country["body"] == CANADA["body"]
        assert country["updated_at"]

    @pytest.mark.asyncio
    async def test_detail_unknown_id_is_404(self, test_client):
        response = await test_client.get("/countries/999")
        assert response.status_code == 404
        assert response.json()["message"] == "Country not found"

    @pytest.mark.asyncio
    async def test_non_integer_id_is_400(self, test_client):
        response = await test_client.get("/countries/abc")
        assert response.status_code == 400


class TestUpdateCountry:

    @pytest.mark.asyncio
    async def test_update_returns_full_row(self, test_client, auth_headers):
        created = (await _create(test_client, auth_headers)).json()["country"]
        response = await test_client.put(
            f"/admin/countries/{created['id']}",
            json={"name": "Canada", "flag_image": "new.png", "body": "Updated body"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        country = response.json()["country"]
        assert response.json()["message"] == "Country updated successfully"
        assert country["flag_image"] == "new.png"
        assert country["body"] == "Updated body"

    @pytest.mark.asyncio
    async def test_update_unknown_id_is_404(self, test_client, auth_headers):
        response = await test_client.put("/admin/countries/999", json=CANADA, headers=auth_headers)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_to_taken_name_is_400(self, test_client, auth_headers):
        await _create(test_client, auth_headers)
        georgia = (await _create(test_client, auth_headers, name="Georgia")).json()["country"]

        response = await test_client.put(
            f"/admin/countries/{georgia['id']}", json=CANADA, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Country with this name already exists"

    @pytest.mark.asyncio
    async def test_update_validates_before_lookup(self, test_client, auth_headers):
        response = await test_client.put(
            "/admin/countries/999", json={"name": "Canada"}, headers=auth_headers
        )
        assert response.status_code == 400


class TestDeleteCountry:

    @pytest.mark.asyncio
    async def test_delete_unreferenced_country(self, test_client, auth_headers):
        created = (await _create(test_client, auth_headers)).json()["country"]
        response = await test_client.delete(
            f"/admin/countries/{created['id']}", headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json() == {"message": "Country deleted successfully"}
        assert (await test_client.get(f"/countries/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_referenced_country_is_400_and_kept(
        self, test_client, auth_headers, college_payload
    ):
        created = (await _create(test_client, auth_headers)).json()["country"]
        college = await test_client.post(
            "/admin/colleges", json=college_payload, headers=auth_headers
        )
        assert college.status_code == 201

        response = await test_client.delete(
            f"/admin/countries/{created['id']}", headers=auth_headers
        )
        assert response.status_code == 400
        assert "colleges associated" in response.json()["message"]
        assert (await test_client.get(f"/countries/{created['id']}")).status_code == 200

    @pytest.mark.asyncio
    async def test_delete_unknown_id_is_404(self, test_client, auth_headers):
        response = await test_client.delete("/admin/countries/999", headers=auth_headers)
        assert response.status_code == 404
