"""
Medsite Backend — Customer Lead API Tests
==========================================
"""

import pytest

LEAD = {
    "name": "Priya Sharma",
    "phone_number": "9876543210",
    "email_address": "priya@example.com",
    "country": "Georgia",
    "state": "Kerala",
    "college_of_interest": "Tbilisi State Medical University",
}


class TestSubmitLead:

    @pytest.mark.asyncio
    async def test_submission_echoes_only_receipt_fields(self, test_client):
        response = await test_client.post("/customers", json=LEAD)
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Interest registered successfully"
        assert set(body["customer"]) == {"id", "name", "phone_number", "created_at"}
        assert body["customer"]["phone_number"] == LEAD["phone_number"]

    @pytest.mark.asyncio
    async def test_no_token_needed(self, test_client):
        response = await test_client.post(
            "/customers", json={"name": "Ravi", "phone_number": "0123456789"}
        )
        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_short_phone_is_400_and_nothing_stored(self, test_client, database):
        response = await test_client.post(
            "/customers", json={**LEAD, "phone_number": "12345"}
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Phone number must be at least 10 digits"
        assert await database.execute("SELECT id FROM customers") == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["name", "phone_number"])
    async def test_missing_name_or_phone_is_400(self, test_client, missing):
        body = {k: v for k, v in LEAD.items() if k != missing}
        response = await test_client.post("/customers", json=body)
        assert response.status_code == 400
        assert response.json()["message"] == "Name and phone number are required"

    @pytest.mark.asyncio
    async def test_numeric_phone_is_accepted_as_text(self, test_client):
        response = await test_client.post(
            "/customers", json={"name": "Ravi", "phone_number": 9876543210}
        )
        assert response.status_code == 201
        assert response.json()["customer"]["phone_number"] == "9876543210"


class TestListLeads:

    @pytest.mark.asyncio
    async def test_admin_sees_full_records_newest_first(self, test_client, auth_headers):
        await test_client.post("/customers", json=LEAD)
        await test_client.post("/customers", json={**LEAD, "name": "Later Lead"})

        response = await test_client.get("/admin/customers", headers=auth_headers)
        assert response.status_code == 200
        leads = response.json()["customers"]
        assert [lead["name"] for lead in leads] == ["Later Lead", "Priya Sharma"]
        assert leads[1]["email_address"] == LEAD["email_address"]
        assert leads[1]["college_of_interest"] == LEAD["college_of_interest"]

    @pytest.mark.asyncio
    async def test_listing_requires_token(self, test_client):
        response = await test_client.get("/admin/customers")
        assert response.status_code == 401
