"""
Tests for JWT handling, login and the first-admin setup flow.
"""

import uuid
from datetime import datetime, timedelta

import pytest
from fastapi import HTTPException

from cueclub.auth import (
    create_access_token,
    decode_access_token,
    get_admin,
    hash_password,
    verify_password,
)

ADMIN_ID = uuid.UUID("5b0c1f9e-8a1d-4c55-9a47-3f2f1f7e2c10")


def admin_row(**overrides):
    row = {
        "id": ADMIN_ID,
        "email": "owner@cueclub.in",
        "password_hash": hash_password("break-147"),
        "is_active": True,
        "last_login": None,
        "created_at": datetime(2025, 1, 1, 9, 0),
    }
    row.update(overrides)
    return row


class TestTokens:
    def test_roundtrip(self):
        token = create_access_token({"email": "owner@cueclub.in", "user_id": str(ADMIN_ID), "role": "admin"})

        payload = decode_access_token(token)

        assert payload["email"] == "owner@cueclub.in"
        assert payload["role"] == "admin"
        assert "exp" in payload

    def test_garbage_token_rejected(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token("not-a-token")

        assert exc_info.value.status_code == 401

    def test_expired_token_rejected(self):
        token = create_access_token({"email": "owner@cueclub.in"}, expires_delta=timedelta(minutes=-5))

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)

        assert exc_info.value.detail == "Could not validate credentials"

    @pytest.mark.asyncio
    async def test_non_admin_role_forbidden(self):
        with pytest.raises(HTTPException) as exc_info:
            await get_admin({"email": "guest@cueclub.in", "user_id": "1", "role": "user"})

        assert exc_info.value.status_code == 403

    def test_password_hashing(self):
        hashed = hash_password("break-147")

        assert hashed != "break-147"
        assert verify_password("break-147", hashed)
        assert not verify_password("foul", hashed)


class TestLogin:
    def test_success_returns_token(self, client, mock_db):
        mock_db.fetch_one.return_value = admin_row()

        response = client.post("/auth/login", json={"email": "owner@cueclub.in", "password": "break-147"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["token_type"] == "bearer"
        payload = decode_access_token(body["access_token"])
        assert payload["user_id"] == str(ADMIN_ID)
        assert payload["role"] == "admin"
        mock_db.execute.assert_awaited_once()

    def test_wrong_password(self, client, mock_db):
        mock_db.fetch_one.return_value = admin_row()

        response = client.post("/auth/login", json={"email": "owner@cueclub.in", "password": "wrong"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"
        mock_db.execute.assert_not_awaited()

    def test_unknown_account(self, client, mock_db):
        response = client.post("/auth/login", json={"email": "nobody@cueclub.in", "password": "x"})

        assert response.status_code == 401

    def test_deactivated_account(self, client, mock_db):
        mock_db.fetch_one.return_value = admin_row(is_active=False)

        response = client.post("/auth/login", json={"email": "owner@cueclub.in", "password": "break-147"})

        assert response.status_code == 403

    def test_me_with_real_token(self, client, mock_db):
        mock_db.fetch_one.return_value = admin_row()
        token = create_access_token({"email": "owner@cueclub.in", "user_id": str(ADMIN_ID), "role": "admin"})

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["email"] == "owner@cueclub.in"
        assert "password_hash" not in response.json()

    def test_me_rejects_non_admin_token(self, client, mock_db):
        token = create_access_token({"email": "guest@cueclub.in", "user_id": "1", "role": "user"})

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403


class TestSetup:
    def test_status_reports_missing_admin(self, client, mock_db):
        mock_db.fetch_val.return_value = 0

        response = client.get("/auth/setup-status")

        assert response.json() == {"admin_exists": False}

    def test_creates_first_admin(self, client, mock_db):
        mock_db.fetch_val.return_value = 0
        mock_db.fetch_one.side_effect = [None, admin_row()]

        response = client.post("/auth/setup", json={
            "email": "owner@cueclub.in",
            "password": "break-147",
            "confirm_password": "break-147",
        })

        assert response.status_code == 201
        assert response.json()["id"] == str(ADMIN_ID)
        assert mock_db.execute.await_count == 2
        role_params = mock_db.execute.call_args_list[1].args[1]
        assert role_params["role"] == "admin"

    def test_disabled_once_admin_exists(self, client, mock_db):
        mock_db.fetch_val.return_value = 1

        response = client.post("/auth/setup", json={
            "email": "second@cueclub.in",
            "password": "break-147",
            "confirm_password": "break-147",
        })

        assert response.status_code == 403
        mock_db.execute.assert_not_awaited()

    def test_mismatched_passwords(self, client, mock_db):
        response = client.post("/auth/setup", json={
            "email": "owner@cueclub.in",
            "password": "break-147",
            "confirm_password": "break-146",
        })

        assert response.status_code == 422

    def test_change_password(self, admin_client, mock_db):
        mock_db.fetch_one.return_value = {"password_hash": hash_password("break-147")}

        response = admin_client.post("/auth/change-password", json={
            "current_password": "break-147",
            "new_password": "maximum-147",
            "confirm_password": "maximum-147",
        })

        assert response.status_code == 200
        params = mock_db.execute.call_args.args[1]
        assert verify_password("maximum-147", params["password_hash"])
