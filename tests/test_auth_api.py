"""
Campus Library Backend — Auth API Tests
=========================================

What:  Login paths, registration, session lifetime and the admin gate,
       exercised over HTTP against a temporary SQLite database.
"""

import pytest

from tests.conftest import ADMIN_LOGIN


class TestAdminLogin:

    @pytest.mark.asyncio
    async def test_valid_credentials_open_admin_session(self, client):
        response = await client.post("/api/auth/login", json=ADMIN_LOGIN)

        assert response.status_code == 200
        body = response.json()
        assert body["user"] == {"id": "admin", "email": "admin@gcmn.edu.pk"}
        assert body["isAdmin"] is True
        assert body["redirect"] == "/admin-dashboard"

        me = await client.get("/api/auth/me")
        assert me.status_code == 200
        assert me.json()["isAdmin"] is True

        # Admin-only route is now reachable
        listing = await client.get("/api/admin/users")
        assert listing.status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field,value", [
        ("email", "intruder@example.com"),
        ("password", "guess"),
        ("secretKey", "wrong"),
    ])
    async def test_any_mismatch_fails(self, client, field, value):
        response = await client.post("/api/auth/login", json={**ADMIN_LOGIN, field: value})

        assert response.status_code == 401
        assert response.json()["error"] == "authentication_error"
        assert response.json()["message"] == "Invalid admin credentials"

        # No session was opened
        assert (await client.get("/api/auth/me")).status_code == 401


class TestUserAccounts:

    @pytest.mark.asyncio
    async def test_register_then_login(self, client):
        response = await client.post(
            "/api/auth/register",
            json={"email": "sara@example.com", "password": "pw123", "fullName": "Sara", "studentClass": "FSc"},
        )
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["email"] == "sara@example.com"

        me = await client.get("/api/auth/me")
        assert me.status_code == 200
        assert me.json()["user"]["id"] == user["id"]
        assert me.json()["isAdmin"] is False

        await client.post("/api/auth/logout")
        login = await client.post("/api/auth/login", json={"email": "sara@example.com", "password": "pw123"})
        assert login.status_code == 200
        assert login.json()["isAdmin"] is False
        assert "redirect" not in login.json()

    @pytest.mark.asyncio
    async def test_registration_sets_type_from_class(self, admin_client, client):
        await client.post("/api/auth/register", json={"email": "s@example.com", "password": "pw", "studentClass": "BSCS"})
        await client.post("/api/auth/register", json={"email": "u@example.com", "password": "pw"})

        users = (await admin_client.get("/api/admin/users")).json()
        types = {u["email"]: u["type"] for u in users}
        assert types == {"s@example.com": "student", "u@example.com": "user"}
        assert all("password" not in u for u in users)

    @pytest.mark.asyncio
    async def test_blank_secret_key_and_card_id_log_in_as_user(self, client):
        await client.post("/api/auth/register", json={"email": "u@example.com", "password": "pw"})
        await client.post("/api/auth/logout")

        login = await client.post(
            "/api/auth/login",
            json={"email": "u@example.com", "password": "pw", "secretKey": "", "libraryCardId": ""},
        )
        assert login.status_code == 200
        assert login.json()["user"]["email"] == "u@example.com"
        assert login.json()["isAdmin"] is False

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, client):
        body = {"email": "dup@example.com", "password": "pw"}
        assert (await client.post("/api/auth/register", json=body)).status_code == 200

        response = await client.post("/api/auth/register", json=body)
        assert response.status_code == 400
        assert response.json()["message"] == "Email already registered"

    @pytest.mark.asyncio
    async def test_wrong_password(self, client):
        await client.post("/api/auth/register", json={"email": "x@example.com", "password": "right"})
        await client.post("/api/auth/logout")

        response = await client.post("/api/auth/login", json={"email": "x@example.com", "password": "wrong"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_invalid_email_is_400(self, client):
        response = await client.post("/api/auth/register", json={"email": "not-an-email", "password": "pw"})
        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"


class TestLibraryCardLogin:

    @pytest.mark.asyncio
    async def test_pending_then_rejected_then_approved(self, client, admin_client, card_application):
        application = await card_application(password="card-pass")
        login = {"libraryCardId": application["cardNumber"], "password": "card-pass"}

        pending = await client.post("/api/auth/login", json=login)
        assert pending.status_code == 401
        assert pending.json()["message"] == "Your account is pending for approval"

        status_url = f"/api/library-card/applications/{application['id']}/status"
        await admin_client.patch(status_url, json={"status": "rejected"})
        rejected = await client.post("/api/auth/login", json=login)
        assert rejected.status_code == 401
        assert rejected.json()["message"] == "Your application was rejected. Please contact library."

        await admin_client.patch(status_url, json={"status": "approved"})
        approved = await client.post("/api/auth/login", json=login)
        assert approved.status_code == 200
        assert approved.json()["user"] == {"id": application["id"], "email": application["email"]}
        assert "isAdmin" not in approved.json()

        me = await client.get("/api/auth/me")
        assert me.json()["user"]["id"] == application["id"]

    @pytest.mark.asyncio
    async def test_wrong_password_or_unknown_card(self, client, card_application):
        application = await card_application(password="card-pass")

        for body in (
            {"libraryCardId": application["cardNumber"], "password": "nope"},
            {"libraryCardId": "GCMN-1999-00000", "password": "card-pass"},
        ):
            response = await client.post("/api/auth/login", json=body)
            assert response.status_code == 401
            assert response.json()["message"] == "Write correct details"


class TestSessionGate:

    @pytest.mark.asyncio
    async def test_me_without_session(self, client):
        response = await client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.json()["message"] == "Not logged in"

    @pytest.mark.asyncio
    async def test_logout_clears_admin_session(self, admin_client):
        assert (await admin_client.post("/api/auth/logout")).json() == {"success": True}
        response = await admin_client.get("/api/admin/users")
        assert response.status_code == 403
        assert response.json()["message"] == "Admin access required"

    @pytest.mark.asyncio
    async def test_regular_user_is_not_admin(self, client):
        await client.post("/api/auth/register", json={"email": "r@example.com", "password": "pw"})
        assert (await client.get("/api/donations")).status_code == 403

    @pytest.mark.asyncio
    async def test_errors_carry_request_id(self, client):
        response = await client.get("/api/auth/me", headers={"X-Request-ID": "trace-42"})
        assert response.headers["X-Request-ID"] == "trace-42"
        assert response.json()["request_id"] == "trace-42"


class TestProfile:

    @pytest.mark.asyncio
    async def test_profile_requires_login(self, client):
        response = await client.get("/api/profile")
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized"

    @pytest.mark.asyncio
    async def test_profile_upsert(self, client):
        registered = await client.post("/api/auth/register", json={"email": "p@example.com", "password": "pw"})
        user_id = registered.json()["user"]["id"]

        assert (await client.get("/api/profile")).json() == {}

        created = await client.post("/api/profile", json={"fullName": "Pat", "department": "Physics"})
        assert created.status_code == 200
        assert created.json()["userId"] == user_id

        updated = await client.post("/api/profile", json={"phone": "0300"})
        assert updated.json()["id"] == created.json()["id"]
        assert updated.json()["fullName"] == "Pat"
        assert updated.json()["phone"] == "0300"

        fetched = await client.get("/api/profile")
        assert fetched.json()["department"] == "Physics"
