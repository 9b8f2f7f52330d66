"""
Tests for the admin booking list filters and counts.
"""

from datetime import date

from cueclub.services.booking_service import booking_counts, filter_bookings, slot_sort_key

TODAY = date(2025, 6, 10)

BOOKINGS = [
    {"id": "a", "user_name": "Ronnie Osullivan", "phone_number": "9876500001",
     "booking_date": date(2025, 6, 9), "time_slot": "5:00 PM", "table_number": 1, "status": "completed"},
    {"id": "b", "user_name": "Judd Trump", "phone_number": "9876500002",
     "booking_date": date(2025, 6, 10), "time_slot": "1:00 PM", "table_number": 2, "status": "confirmed"},
    {"id": "c", "user_name": "Mark Selby", "phone_number": "9123400003",
     "booking_date": date(2025, 6, 12), "time_slot": "10:00 AM", "table_number": 3, "status": "cancelled"},
    {"id": "d", "user_name": "ronnie junior", "phone_number": "9123400004",
     "booking_date": date(2025, 6, 15), "time_slot": "8:00 PM", "table_number": 4, "status": "confirmed"},
]


def ids(rows):
    return [row["id"] for row in rows]


def test_all_sorted_newest_date_first():
    assert ids(filter_bookings(BOOKINGS, "all", today=TODAY)) == ["d", "c", "b", "a"]


def test_today():
    assert ids(filter_bookings(BOOKINGS, "today", today=TODAY)) == ["b"]


def test_upcoming_includes_today():
    assert ids(filter_bookings(BOOKINGS, "upcoming", today=TODAY)) == ["d", "c", "b"]


def test_status_filters():
    assert ids(filter_bookings(BOOKINGS, "confirmed", today=TODAY)) == ["d", "b"]
    assert ids(filter_bookings(BOOKINGS, "cancelled", today=TODAY)) == ["c"]


def test_search_name_case_insensitive():
    assert ids(filter_bookings(BOOKINGS, "all", search="RONNIE", today=TODAY)) == ["d", "a"]


def test_search_phone_substring():
    assert ids(filter_bookings(BOOKINGS, "all", search="91234", today=TODAY)) == ["d", "c"]


def test_search_and_filter_combine():
    assert ids(filter_bookings(BOOKINGS, "confirmed", search="ronnie", today=TODAY)) == ["d"]


def test_blank_search_matches_everything():
    assert len(filter_bookings(BOOKINGS, "all", search="", today=TODAY)) == 4


def test_counts():
    assert booking_counts(BOOKINGS, today=TODAY) == {
        "today_count": 1,
        "confirmed_count": 2,
        "cancelled_count": 1,
    }


def test_slot_sort_key_uses_day_order_not_string_order():
    morning = {"booking_date": TODAY, "time_slot": "10:00 AM", "table_number": 1}
    afternoon = {"booking_date": TODAY, "time_slot": "1:00 PM", "table_number": 1}

    assert sorted([afternoon, morning], key=slot_sort_key) == [morning, afternoon]
