"""
Tests for the public club site: pages, reference data, booking, sign-up and contact.
"""

import uuid
from datetime import date, datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import HTTPException

from cueclub.services.booking_service import BookingService, SLOT_TAKEN_MESSAGE

TOMORROW = date.today() + timedelta(days=1)

SETTINGS_ROW = {
    "id": uuid.uuid4(),
    "club_name": "Cue Club Sigra",
    "address": "Sigra, Varanasi, Uttar Pradesh",
    "opening_hours": "10:00 AM - 11:00 PM",
    "contact_number": "+91 98765 43210",
    "whatsapp_number": "+91 98765 43210",
    "google_maps_link": None,
    "created_at": datetime(2025, 1, 1),
    "updated_at": None,
}


def booking_payload(**overrides):
    payload = {
        "booking_date": TOMORROW.isoformat(),
        "time_slot": "5:00 PM",
        "table_number": 3,
        "user_name": "Ronnie",
        "phone_number": "+91 98765 43210",
    }
    payload.update(overrides)
    return payload


class TestPages:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_home_page_renders_club_details(self, client, mock_db):
        mock_db.fetch_one.return_value = SETTINGS_ROW

        response = client.get("/")

        assert response.status_code == 200
        assert "Cue Club Sigra" in response.text
        assert "https://wa.me/919876543210" in response.text
        assert "output=embed" in response.text
        assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"

    def test_home_page_before_settings_exist(self, client, mock_db):
        response = client.get("/")

        assert response.status_code == 200
        assert "Club details coming soon." in response.text

    def test_admin_setup_page_once_configured(self, client, mock_db):
        mock_db.fetch_val.return_value = 1

        response = client.get("/admin-setup")

        assert "already configured" in response.text
        assert 'id="setup-form"' not in response.text

    def test_booking_confirmation_escapes_customer_name(self, client):
        script = client.get("/static/js/site.js").text

        assert "escapeHtml(summary.user_name)" in script
        assert "${summary.user_name}" not in script

    def test_unknown_api_path_is_json(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    def test_unknown_page_is_html(self, client):
        response = client.get("/nothing-here", headers={"accept": "text/html"})

        assert response.status_code == 404
        assert "text/html" in response.headers["content-type"]


class TestReferenceData:
    def test_settings_not_configured(self, client, mock_db):
        response = client.get("/api/settings")

        assert response.status_code == 404
        assert response.json()["detail"] == "Club settings have not been configured yet"

    def test_settings_include_links(self, client, mock_db):
        mock_db.fetch_one.return_value = SETTINGS_ROW

        body = client.get("/api/settings").json()

        assert body["phone_url"] == "tel:+919876543210"
        assert body["directions_url"].startswith("https://www.google.com/maps/search/")

    def test_booking_dates(self, client):
        body = client.get("/api/bookings/dates").json()

        assert len(body["dates"]) == 14
        assert body["dates"][0] == date.today().isoformat()
        assert len(body["time_slots"]) == 13
        assert body["tables"] == [1, 2, 3, 4, 5, 6]

    def test_availability_hides_customer_details(self, client, mock_db):
        mock_db.fetch_all.side_effect = [
            [{"booking_date": TOMORROW, "time_slot": "5:00 PM", "table_number": 3,
              "user_name": "Ronnie", "phone_number": "123", "status": "confirmed"}],
            [],
        ]

        response = client.get("/api/bookings/availability", params={"date": TOMORROW.isoformat()})

        assert response.status_code == 200
        assert "Ronnie" not in response.text
        slot = next(s for s in response.json()["slots"] if s["time_slot"] == "5:00 PM")
        assert slot["available_tables"] == [1, 2, 4, 5, 6]

    @pytest.mark.parametrize("offset", [-1, 14, 365])
    def test_availability_outside_booking_window_rejected(self, client, mock_db, offset):
        day = date.today() + timedelta(days=offset)

        response = client.get("/api/bookings/availability", params={"date": day.isoformat()})

        assert response.status_code == 422
        mock_db.fetch_all.assert_not_awaited()

    def test_availability_for_distant_past_rejected(self, client, mock_db):
        response = client.get("/api/bookings/availability", params={"date": "2000-01-01"})

        assert response.status_code == 422

    def test_active_tournaments(self, client, mock_db):
        mock_db.fetch_all.return_value = [{
            "id": uuid.uuid4(), "tournament_name": "Monsoon Open", "date": TOMORROW,
            "status": "upcoming", "registration_count": 4,
        }]

        body = client.get("/api/tournaments").json()

        assert body[0]["registration_count"] == 4
        assert "IN ('upcoming', 'ongoing')" in mock_db.fetch_all.call_args.args[0]


class TestBooking:
    def test_confirmed_booking(self, client, mock_db):
        booking_id = uuid.uuid4()
        mock_db.fetch_one.return_value = {
            "id": booking_id, "booking_date": TOMORROW, "time_slot": "5:00 PM",
            "table_number": 3, "user_name": "Ronnie", "status": "confirmed",
        }

        response = client.post("/api/bookings", json=booking_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["booking_id"] == str(booking_id)
        assert body["status"] == "confirmed"
        assert body["reset_after_seconds"] == 5

    def test_taken_slot_is_conflict(self, client):
        with patch.object(BookingService, "create_booking", new_callable=AsyncMock) as create:
            create.side_effect = HTTPException(status_code=409, detail=SLOT_TAKEN_MESSAGE)
            response = client.post("/api/bookings", json=booking_payload())

        assert response.status_code == 409
        assert response.json()["detail"] == SLOT_TAKEN_MESSAGE

    def test_past_date_rejected(self, client, mock_db):
        response = client.post(
            "/api/bookings",
            json=booking_payload(booking_date=(date.today() - timedelta(days=1)).isoformat())
        )

        assert response.status_code == 422
        mock_db.fetch_one.assert_not_awaited()

    def test_unknown_table_rejected(self, client, mock_db):
        response = client.post("/api/bookings", json=booking_payload(table_number=7))

        assert response.status_code == 422


class TestRegistrationAndContact:
    def test_register_player(self, client, mock_db):
        tournament_id = uuid.uuid4()
        mock_db.fetch_one.side_effect = [
            {"id": tournament_id, "status": "upcoming"},
            {"id": uuid.uuid4(), "tournament_id": tournament_id, "player_name": "Judd",
             "phone_number": "+44 7700 900123", "email": None},
        ]

        response = client.post(
            f"/api/tournaments/{tournament_id}/registrations",
            json={"player_name": "Judd", "phone_number": "+44 7700 900123", "email": ""}
        )

        assert response.status_code == 201
        assert mock_db.fetch_one.call_args.args[1]["email"] is None

    def test_register_for_missing_tournament(self, client, mock_db):
        response = client.post(
            f"/api/tournaments/{uuid.uuid4()}/registrations",
            json={"player_name": "Judd", "phone_number": "+44 7700 900123"}
        )

        assert response.status_code == 404

    def test_register_for_closed_tournament(self, client, mock_db):
        mock_db.fetch_one.return_value = {"id": uuid.uuid4(), "status": "completed"}

        response = client.post(
            f"/api/tournaments/{uuid.uuid4()}/registrations",
            json={"player_name": "Judd", "phone_number": "+44 7700 900123"}
        )

        assert response.status_code == 400

    def test_contact_message(self, client, mock_db):
        mock_db.fetch_one.return_value = {"id": uuid.uuid4()}

        response = client.post("/api/contact", json={
            "name": "Shaun", "email": "shaun@example.com", "message": "Do you run coaching sessions?"
        })

        assert response.status_code == 201
        assert response.json()["status"] == "success"
        assert mock_db.fetch_one.call_args.args[1]["email"] == "shaun@example.com"

    def test_contact_requires_valid_email(self, client, mock_db):
        response = client.post("/api/contact", json={"name": "Shaun", "email": "nope", "message": "Hi"})

        assert response.status_code == 422


class TestAdminGuard:
    def test_dashboard_needs_token(self, client):
        response = client.get("/admin/dashboard")

        assert response.status_code in (401, 403)

    def test_dashboard_rejects_bad_token(self, client):
        response = client.get("/admin/dashboard", headers={"Authorization": "Bearer junk"})

        assert response.status_code == 401
