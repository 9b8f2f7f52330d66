"""
Tests for request validation.
"""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from cueclub.schemas.admin import SetupRequest, ChangePasswordRequest
from cueclub.schemas.booking import CreateBookingRequest, CreateBlockedSlotRequest, UpdateBookingRequest
from cueclub.schemas.club import ContactMessageRequest, UpdateSettingsRequest
from cueclub.schemas.media import UpdateGalleryImageRequest, UpdateSlideRequest
from cueclub.schemas.pricing import UpdatePricingRequest
from cueclub.schemas.tournament import RegistrationRequest, CreateTournamentRequest, UpdateTournamentRequest


def booking_payload(**overrides):
    payload = {
        "booking_date": (date.today() + timedelta(days=1)).isoformat(),
        "time_slot": "5:00 PM",
        "table_number": 3,
        "user_name": "Ronnie",
        "phone_number": "+91 98765 43210",
    }
    payload.update(overrides)
    return payload


class TestCreateBookingRequest:
    def test_valid_booking_is_trimmed(self):
        request = CreateBookingRequest(**booking_payload(user_name="  Ronnie  "))

        assert request.user_name == "Ronnie"
        assert request.table_number == 3

    @pytest.mark.parametrize("field", ["user_name", "phone_number"])
    def test_whitespace_only_fields_rejected(self, field):
        with pytest.raises(ValidationError):
            CreateBookingRequest(**booking_payload(**{field: "   "}))

    def test_unknown_time_slot_rejected(self):
        with pytest.raises(ValidationError):
            CreateBookingRequest(**booking_payload(time_slot="11:00 PM"))

    @pytest.mark.parametrize("table", [0, 7])
    def test_table_out_of_range_rejected(self, table):
        with pytest.raises(ValidationError):
            CreateBookingRequest(**booking_payload(table_number=table))

    def test_today_and_last_window_day_accepted(self):
        today = date.today()
        CreateBookingRequest(**booking_payload(booking_date=today.isoformat()))
        CreateBookingRequest(**booking_payload(booking_date=(today + timedelta(days=13)).isoformat()))

    @pytest.mark.parametrize("offset", [-1, 14])
    def test_dates_outside_window_rejected(self, offset):
        day = date.today() + timedelta(days=offset)
        with pytest.raises(ValidationError):
            CreateBookingRequest(**booking_payload(booking_date=day.isoformat()))


class TestUpdateBookingRequest:
    def test_partial_update_keeps_only_set_fields(self):
        request = UpdateBookingRequest(status="cancelled")
        assert request.model_dump(exclude_unset=True) == {"status": "cancelled"}

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            UpdateBookingRequest(status="pending")

    @pytest.mark.parametrize("field", ["status", "user_name", "phone_number", "booking_date", "time_slot", "table_number"])
    def test_explicit_null_rejected(self, field):
        with pytest.raises(ValidationError, match="may not be null"):
            UpdateBookingRequest(**{field: None})

    def test_notes_can_be_cleared(self):
        request = UpdateBookingRequest(notes=None)
        assert request.model_dump(exclude_unset=True) == {"notes": None}


class TestCreateBlockedSlotRequest:
    def test_empty_time_slot_means_all_slots(self):
        request = CreateBlockedSlotRequest(blocked_date="2025-06-01", time_slot="")
        assert request.time_slot is None
        assert request.table_number is None

    def test_unknown_time_slot_rejected(self):
        with pytest.raises(ValidationError):
            CreateBlockedSlotRequest(blocked_date="2025-06-01", time_slot="3:30 PM")


class TestRegistrationRequest:
    def test_valid_registration(self):
        request = RegistrationRequest(player_name=" Judd ", phone_number="+91 (987) 654-3210")

        assert request.player_name == "Judd"
        assert request.email is None

    def test_empty_email_is_none(self):
        request = RegistrationRequest(player_name="Judd", phone_number="9876543210", email="  ")
        assert request.email is None

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            RegistrationRequest(player_name="Judd", phone_number="9876543210", email="not-an-email")

    @pytest.mark.parametrize("phone", ["12345", "98765abc10", "+" + "1" * 25])
    def test_bad_phone_rejected(self, phone):
        with pytest.raises(ValidationError):
            RegistrationRequest(player_name="Judd", phone_number=phone)

    def test_player_name_length(self):
        with pytest.raises(ValidationError):
            RegistrationRequest(player_name="x" * 101, phone_number="9876543210")


class TestTournamentRequest:
    def test_defaults_to_upcoming(self):
        request = CreateTournamentRequest(tournament_name="Monsoon Open", date="2025-07-20")
        assert request.status == "upcoming"
        assert request.date == date(2025, 7, 20)

    def test_negative_entry_fee_rejected(self):
        with pytest.raises(ValidationError):
            CreateTournamentRequest(tournament_name="Monsoon Open", date="2025-07-20", entry_fee=-1)


class TestAdminRequests:
    def test_setup_passwords_must_match(self):
        with pytest.raises(ValidationError, match="Passwords don't match"):
            SetupRequest(email="admin@example.com", password="secret1", confirm_password="secret2")

    def test_setup_password_min_length(self):
        with pytest.raises(ValidationError):
            SetupRequest(email="admin@example.com", password="abc", confirm_password="abc")

    def test_setup_valid(self):
        request = SetupRequest(email="admin@example.com", password="secret1", confirm_password="secret1")
        assert request.email == "admin@example.com"

    def test_change_password_min_length(self):
        with pytest.raises(ValidationError):
            ChangePasswordRequest(current_password="old", new_password="short", confirm_password="short")


class TestClubRequests:
    def test_contact_message_requires_valid_email(self):
        with pytest.raises(ValidationError):
            ContactMessageRequest(name="Steve", email="steve", message="Hi")

    def test_contact_message_blank_message_rejected(self):
        with pytest.raises(ValidationError):
            ContactMessageRequest(name="Steve", email="steve@example.com", message="   ")

    def test_settings_update_is_partial(self):
        request = UpdateSettingsRequest(opening_hours="9 AM - 11 PM")
        assert request.model_dump(exclude_unset=True) == {"opening_hours": "9 AM - 11 PM"}

    @pytest.mark.parametrize("field", ["club_name", "address", "opening_hours"])
    def test_settings_required_fields_not_nullable(self, field):
        with pytest.raises(ValidationError, match="may not be null"):
            UpdateSettingsRequest(**{field: None})

    def test_settings_optional_links_can_be_cleared(self):
        request = UpdateSettingsRequest(google_maps_link=None, contact_number=None)
        assert request.model_dump(exclude_unset=True) == {"google_maps_link": None, "contact_number": None}


class TestNullableUpdateFields:
    @pytest.mark.parametrize("field", ["tournament_name", "date", "status"])
    def test_tournament_null_rejected(self, field):
        with pytest.raises(ValidationError):
            UpdateTournamentRequest(**{field: None})

    def test_tournament_description_can_be_cleared(self):
        assert UpdateTournamentRequest(description=None).model_dump(exclude_unset=True) == {"description": None}

    @pytest.mark.parametrize("field", ["title", "price", "features", "is_popular", "active", "sort_order"])
    def test_pricing_null_rejected(self, field):
        with pytest.raises(ValidationError):
            UpdatePricingRequest(**{field: None})

    def test_gallery_order_null_rejected(self):
        with pytest.raises(ValidationError):
            UpdateGalleryImageRequest(order_index=None)

    def test_slide_active_null_rejected(self):
        with pytest.raises(ValidationError):
            UpdateSlideRequest(active=None)
