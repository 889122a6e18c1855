"""
Campus Library Backend — Events, Notifications, Contact and Donation API Tests
================================================================================
"""

import uuid
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from campus_library.database import async_session_factory
from campus_library.models.notification import Notification

from tests.conftest import PNG_BYTES


class TestEvents:

    @pytest.mark.asyncio
    async def test_create_with_images(self, admin_client, client):
        response = await admin_client.post(
            "/api/events",
            data={"title": "Book Fair", "description": "Annual fair", "date": "2024-11-05"},
            files=[
                ("images", ("a.png", PNG_BYTES, "image/png")),
                ("images", ("b.jpg", PNG_BYTES, "image/jpeg")),
            ],
        )
        assert response.status_code == 200, response.text
        event = response.json()
        assert event["date"] == "2024-11-05"
        assert len(event["images"]) == 2

        listing = (await client.get("/api/events")).json()
        assert listing[0]["images"] == event["images"]

    @pytest.mark.asyncio
    async def test_more_than_ten_images_rejected(self, admin_client):
        files = [("images", (f"{i}.png", PNG_BYTES, "image/png")) for i in range(11)]
        response = await admin_client.post(
            "/api/events", data={"title": "t", "description": "d"}, files=files
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_patch_and_delete(self, admin_client):
        event = (await admin_client.post("/api/events", data={"title": "t", "description": "d"})).json()
        assert event["images"] == []

        patched = await admin_client.patch(f"/api/events/{event['id']}", json={"title": "Renamed"})
        assert patched.json()["title"] == "Renamed"

        assert (await admin_client.delete(f"/api/events/{event['id']}")).json() == {"success": True}
        missing = await admin_client.patch(f"/api/events/{event['id']}", json={"title": "x"})
        assert missing.status_code == 404


class TestNotifications:

    @pytest.mark.asyncio
    async def test_text_notification(self, admin_client, client):
        response = await admin_client.post(
            "/api/notifications", data={"title": "Closed", "message": "Closed on Friday", "type": "text"}
        )
        assert response.status_code == 200, response.text
        assert (await client.get("/api/notifications")).json()[0]["message"] == "Closed on Friday"

    @pytest.mark.asyncio
    async def test_image_notification_with_upload(self, admin_client):
        response = await admin_client.post(
            "/api/notifications",
            data={"title": "Poster", "type": "image"},
            files={"image": ("poster.png", PNG_BYTES, "image/png")},
        )
        assert response.status_code == 200, response.text
        assert response.json()["image"].startswith("/server/uploads/")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data", [
        {"type": "text"},
        {"type": "image", "message": "no image"},
        {"type": "both", "message": "only text"},
        {"type": "banner", "message": "hi"},
    ])
    async def test_content_must_match_type(self, admin_client, data):
        response = await admin_client.post("/api/notifications", data=data)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_both_with_image_path(self, admin_client):
        response = await admin_client.post(
            "/api/notifications",
            data={"type": "both", "message": "See poster", "image": "/server/uploads/p.png"},
        )
        assert response.status_code == 200
        assert response.json()["image"] == "/server/uploads/p.png"

    @pytest.mark.asyncio
    async def test_table_rejects_unknown_type(self, db_schema):
        async with async_session_factory() as session:
            session.add(Notification(type="banner", message="hi"))
            with pytest.raises(IntegrityError):
                await session.flush()


class TestContactMessages:

    @pytest.mark.asyncio
    async def test_submit_and_mark_seen(self, client, admin_client):
        sent = await client.post(
            "/api/contact",
            json={"name": "Omar", "email": "omar@example.com", "subject": "Hours", "message": "Open Sunday?"},
        )
        assert sent.status_code == 200
        assert sent.json()["isSeen"] is False

        assert (await client.get("/api/contact-messages")).status_code == 403

        message_id = sent.json()["id"]
        seen = await admin_client.patch(f"/api/contact-messages/{message_id}/seen", json={"isSeen": True})
        assert seen.json()["isSeen"] is True

        inbox = (await admin_client.get("/api/contact-messages")).json()
        assert [m["id"] for m in inbox] == [message_id]

        assert (await admin_client.delete(f"/api/contact-messages/{message_id}")).json() == {"success": True}

    @pytest.mark.asyncio
    async def test_missing_fields_rejected(self, client):
        response = await client.post("/api/contact", json={"name": "Omar"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_seen_on_unknown_message_is_404(self, admin_client):
        response = await admin_client.patch(f"/api/contact-messages/{uuid.uuid4()}/seen", json={"isSeen": True})
        assert response.status_code == 404


class TestDonations:

    @pytest.mark.asyncio
    async def test_public_donation_admin_listing(self, client, admin_client):
        response = await client.post(
            "/api/donations", json={"amount": "1500.50", "method": "bank", "name": "Alumni"}
        )
        assert response.status_code == 200, response.text
        assert Decimal(str(response.json()["amount"])) == Decimal("1500.50")
        assert response.json()["status"] == "completed"

        assert (await client.get("/api/donations")).status_code == 403
        assert len((await admin_client.get("/api/donations")).json()) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["0", "-5"])
    async def test_amount_must_be_positive(self, client, amount):
        response = await client.post("/api/donations", json={"amount": amount, "method": "cash"})
        assert response.status_code == 400
