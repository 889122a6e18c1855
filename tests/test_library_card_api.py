"""
Campus Library Backend — Library Card, Upload Serving and Health API Tests
============================================================================
"""

import re
import uuid
from datetime import date

import pytest

from tests.conftest import card_application_body


class TestLibraryCardApplications:

    @pytest.mark.asyncio
    async def test_apply_generates_card_and_hides_password(self, card_application):
        application = await card_application()

        assert application["status"] == "pending"
        assert re.fullmatch(r"GCMN-\d{4}-\d{5}", application["cardNumber"])
        assert application["class"] == "BSCS"
        assert "password" not in application

    @pytest.mark.asyncio
    async def test_status_in_body_is_ignored(self, client):
        body = card_application_body(status="approved")
        response = await client.post("/api/library-card/apply", json=body)
        assert response.json()["status"] == "pending"

    @pytest.mark.asyncio
    async def test_duplicate_card_number_rejected(self, card_application, client):
        await card_application(cardNumber="GCMN-2024-11111")
        response = await client.post(
            "/api/library-card/apply", json=card_application_body(cardNumber="GCMN-2024-11111")
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_missing_required_fields(self, client):
        body = card_application_body()
        del body["rollNo"]
        response = await client.post("/api/library-card/apply", json=body)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_approval_sets_dates(self, card_application, admin_client):
        application = await card_application()

        response = await admin_client.patch(
            f"/api/library-card/applications/{application['id']}/status", json={"status": "approved"}
        )
        assert response.status_code == 200
        approved = response.json()
        issued = date.fromisoformat(approved["issueDate"])
        valid_through = date.fromisoformat(approved["validThrough"])
        assert (valid_through - issued).days == 365

    @pytest.mark.asyncio
    async def test_invalid_status_is_400(self, card_application, admin_client):
        application = await card_application()
        response = await admin_client.patch(
            f"/api/library-card/applications/{application['id']}/status", json={"status": "active"}
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_review_queue_is_admin_only(self, card_application, client, admin_client):
        application = await card_application()
        assert (await client.get("/api/library-card/applications")).status_code == 403

        queue = (await admin_client.get("/api/library-card/applications")).json()
        assert [a["id"] for a in queue] == [application["id"]]

        url = f"/api/library-card/applications/{application['id']}"
        assert (await admin_client.delete(url)).json() == {"success": True}
        assert (await admin_client.delete(url)).json() == {"success": True}

    @pytest.mark.asyncio
    async def test_status_on_unknown_application_is_404(self, admin_client):
        response = await admin_client.patch(
            f"/api/library-card/applications/{uuid.uuid4()}/status", json={"status": "approved"}
        )
        assert response.status_code == 404


class TestUploadsAndHealth:

    @pytest.mark.asyncio
    async def test_missing_upload_is_404(self, client):
        response = await client.get("/server/uploads/2024/01/01/nothing.png")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_traversal_is_400(self, client):
        response = await client.get("/server/uploads/..%2F..%2Fetc%2Fpasswd")
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == "1.0.0"
