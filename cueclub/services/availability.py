"""
Slot Availability
Pure functions that decide which (date, time slot, table) combinations are free
"""

from datetime import date, timedelta
from typing import Any, Iterable, List, Mapping, Optional, Union

TIME_SLOTS = [
    "10:00 AM",
    "11:00 AM",
    "12:00 PM",
    "1:00 PM",
    "2:00 PM",
    "3:00 PM",
    "4:00 PM",
    "5:00 PM",
    "6:00 PM",
    "7:00 PM",
    "8:00 PM",
    "9:00 PM",
    "10:00 PM",
]

TABLES = [1, 2, 3, 4, 5, 6]

# Only confirmed bookings occupy a slot
OCCUPYING_STATUS = "confirmed"

Row = Mapping[str, Any]
DateLike = Union[date, str]


def as_date(value: DateLike) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def is_slot_booked(bookings: Iterable[Row], day: DateLike, time_slot: str, table_number: int) -> bool:
    """True if a confirmed booking holds this exact slot"""
    day = as_date(day)
    return any(
        as_date(b["booking_date"]) == day
        and b["time_slot"] == time_slot
        and b["table_number"] == table_number
        and b["status"] == OCCUPYING_STATUS
        for b in bookings
    )


def is_slot_blocked(blocked_slots: Iterable[Row], day: DateLike, time_slot: str, table_number: int) -> bool:
    """
    True if any blocked-slot rule for the date covers this slot

    A NULL time_slot or table_number on the rule matches every value.
    """
    day = as_date(day)
    return any(
        as_date(b["blocked_date"]) == day
        and (b["time_slot"] is None or b["time_slot"] == time_slot)
        and (b["table_number"] is None or b["table_number"] == table_number)
        for b in blocked_slots
    )


def is_slot_available(
    bookings: Iterable[Row],
    blocked_slots: Iterable[Row],
    day: DateLike,
    time_slot: str,
    table_number: int
) -> bool:
    bookings = list(bookings)
    blocked_slots = list(blocked_slots)
    return (
        not is_slot_booked(bookings, day, time_slot, table_number)
        and not is_slot_blocked(blocked_slots, day, time_slot, table_number)
    )


def available_tables_for_slot(
    bookings: Iterable[Row],
    blocked_slots: Iterable[Row],
    day: DateLike,
    time_slot: str
) -> List[int]:
    """Tables (in display order) that can still be booked at a time slot"""
    bookings = list(bookings)
    blocked_slots = list(blocked_slots)
    return [
        table for table in TABLES
        if is_slot_available(bookings, blocked_slots, day, time_slot, table)
    ]


def available_table_count(
    bookings: Iterable[Row],
    blocked_slots: Iterable[Row],
    day: DateLike,
    time_slot: str
) -> int:
    return len(available_tables_for_slot(bookings, blocked_slots, day, time_slot))


def build_day_availability(day: DateLike, bookings: Iterable[Row], blocked_slots: Iterable[Row]) -> List[dict]:
    """
    Availability grid for one date

    Every time slot is returned, in order, even when no table is free,
    so the slot picker can render it as full rather than leave it out.
    """
    day = as_date(day)
    bookings = list(bookings)
    blocked_slots = list(blocked_slots)

    grid = []
    for time_slot in TIME_SLOTS:
        tables = available_tables_for_slot(bookings, blocked_slots, day, time_slot)
        grid.append({
            "time_slot": time_slot,
            "available_tables": tables,
            "available_count": len(tables),
            "is_full": not tables,
        })
    return grid


def booking_dates(today: Optional[date] = None, days: int = 14) -> List[date]:
    """Dates open for booking: today and the following days - 1 days"""
    today = today or date.today()
    return [today + timedelta(days=i) for i in range(days)]
