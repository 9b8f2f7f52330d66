"""
Booking Service
Table bookings, blocked slots and the public availability grid
"""

import logging
from datetime import date
from typing import Iterable, List, Mapping, Optional
from uuid import UUID, uuid4

from fastapi import HTTPException, status

from cueclub.config import settings
from cueclub.database import database, is_unique_violation
from cueclub.schemas.booking import CreateBookingRequest, UpdateBookingRequest, CreateBlockedSlotRequest
from cueclub.services import cache
from cueclub.services.availability import (
    OCCUPYING_STATUS,
    TABLES,
    TIME_SLOTS,
    build_day_availability,
    is_slot_blocked,
    as_date,
)
from cueclub.services.cache import query_cache
from cueclub.services.crud import fetch_row, update_row, delete_row

logger = logging.getLogger(__name__)

# Partial unique index on (booking_date, time_slot, table_number) WHERE status = 'confirmed'
BOOKING_UNIQUE_INDEX = "unique_booking"

SLOT_TAKEN_MESSAGE = "This time slot has just been booked. Please select another."
SLOT_BLOCKED_MESSAGE = "This slot is not available for booking."
BOOKING_FAILED_MESSAGE = "Booking failed. Something went wrong. Please try again."

# Fields that decide which slot a booking occupies
PLACEMENT_FIELDS = {"status", "booking_date", "time_slot", "table_number"}


def filter_bookings(
    bookings: Iterable[Mapping],
    filter_type: str = "all",
    search: Optional[str] = None,
    today: Optional[date] = None
) -> List[dict]:
    """
    Admin list view over already-fetched bookings

    search matches the customer name (case-insensitive) or a phone substring.
    Results are ordered newest date first.
    """
    today = today or date.today()
    rows = [dict(b) for b in bookings]

    if search:
        query = search.strip().lower()
        rows = [
            b for b in rows
            if query in b["user_name"].lower() or query in b["phone_number"]
        ]

    if filter_type == "today":
        rows = [b for b in rows if as_date(b["booking_date"]) == today]
    elif filter_type == "upcoming":
        rows = [b for b in rows if as_date(b["booking_date"]) >= today]
    elif filter_type in ("confirmed", "cancelled"):
        rows = [b for b in rows if b["status"] == filter_type]

    return sorted(rows, key=lambda b: as_date(b["booking_date"]), reverse=True)


def booking_counts(bookings: Iterable[Mapping], today: Optional[date] = None) -> dict:
    today = today or date.today()
    bookings = list(bookings)
    return {
        "today_count": sum(1 for b in bookings if as_date(b["booking_date"]) == today),
        "confirmed_count": sum(1 for b in bookings if b["status"] == "confirmed"),
        "cancelled_count": sum(1 for b in bookings if b["status"] == "cancelled"),
    }


def slot_sort_key(booking: Mapping):
    """Chronological order: date, then position of the time slot in the day"""
    slot = booking["time_slot"]
    position = TIME_SLOTS.index(slot) if slot in TIME_SLOTS else len(TIME_SLOTS)
    return as_date(booking["booking_date"]), position, booking["table_number"]


class BookingService:
    """Service for booking operations"""

    @staticmethod
    async def get_bookings_for_date(booking_date: date) -> List[dict]:
        rows = await database.fetch_all(
            """
            SELECT booking_date, time_slot, table_number, status
            FROM bookings
            WHERE booking_date = :booking_date
            """,
            {"booking_date": booking_date}
        )
        return [dict(r) for r in rows]

    @staticmethod
    async def list_blocked_slots(blocked_date: Optional[date] = None) -> List[dict]:
        if blocked_date is not None:
            rows = await database.fetch_all(
                """
                SELECT * FROM blocked_slots
                WHERE blocked_date = :blocked_date
                ORDER BY created_at
                """,
                {"blocked_date": blocked_date}
            )
        else:
            rows = await database.fetch_all(
                "SELECT * FROM blocked_slots ORDER BY blocked_date DESC, created_at"
            )
        return [dict(r) for r in rows]

    @staticmethod
    async def get_day_availability(booking_date: date) -> dict:
        """Availability grid for a date; exposes slot status only, never customer details"""

        async def fetch():
            bookings = await BookingService.get_bookings_for_date(booking_date)
            blocked = await BookingService.list_blocked_slots(booking_date)
            return {
                "date": booking_date,
                "tables": list(TABLES),
                "slots": build_day_availability(booking_date, bookings, blocked),
            }

        return await query_cache.get_or_fetch(cache.BOOKING_AVAILABILITY, fetch, key=booking_date)

    @staticmethod
    async def create_booking(data: CreateBookingRequest) -> dict:
        """
        Create a confirmed booking

        The partial unique index decides races between two customers: the
        second insert fails and is reported as a conflict.
        """
        blocked = await BookingService.list_blocked_slots(data.booking_date)
        if is_slot_blocked(blocked, data.booking_date, data.time_slot, data.table_number):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=SLOT_BLOCKED_MESSAGE
            )

        try:
            booking = await database.fetch_one(
                """
                INSERT INTO bookings
                (id, user_name, phone_number, booking_date, time_slot, table_number, status, notes)
                VALUES (:id, :user_name, :phone_number, :booking_date, :time_slot, :table_number, 'confirmed', NULL)
                RETURNING *
                """,
                {
                    "id": str(uuid4()),
                    "user_name": data.user_name,
                    "phone_number": data.phone_number,
                    "booking_date": data.booking_date,
                    "time_slot": data.time_slot,
                    "table_number": data.table_number
                }
            )
        except Exception as e:
            if is_unique_violation(e, BOOKING_UNIQUE_INDEX):
                logger.info(
                    "Booking conflict on %s %s table %s",
                    data.booking_date, data.time_slot, data.table_number
                )
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=SLOT_TAKEN_MESSAGE
                )
            logger.exception("Booking insert failed")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=BOOKING_FAILED_MESSAGE
            )

        await query_cache.invalidate(cache.BOOKINGS, cache.BOOKING_AVAILABILITY)
        return dict(booking)

    @staticmethod
    def confirmation_summary(booking: Mapping) -> dict:
        booking_date = as_date(booking["booking_date"])
        return {
            "booking_id": booking["id"],
            "booking_date": booking_date,
            "date_label": f"{booking_date:%A, %B} {booking_date.day}, {booking_date.year}",
            "time_slot": booking["time_slot"],
            "table_number": booking["table_number"],
            "user_name": booking["user_name"],
            "status": booking["status"],
            "reset_after_seconds": settings.BOOKING_CONFIRMATION_RESET_SECONDS,
        }

    @staticmethod
    async def list_all_bookings() -> List[dict]:
        rows = await database.fetch_all(
            "SELECT * FROM bookings ORDER BY booking_date DESC, created_at DESC"
        )
        return [dict(r) for r in rows]

    @staticmethod
    async def get_booking(booking_id: UUID) -> dict:
        return await fetch_row("bookings", booking_id, "Booking")

    @staticmethod
    async def update_booking(booking_id: UUID, data: UpdateBookingRequest) -> dict:
        """
        Update status / details

        A change that leaves the booking confirmed on a blocked slot is refused,
        as is moving onto a slot another confirmed booking holds.
        """
        fields = data.model_dump(exclude_unset=True)

        if PLACEMENT_FIELDS & fields.keys() and fields.get("status", OCCUPYING_STATUS) == OCCUPYING_STATUS:
            current = await BookingService.get_booking(booking_id)
            target = {**current, **fields}
            if target["status"] == OCCUPYING_STATUS:
                blocked = await BookingService.list_blocked_slots(as_date(target["booking_date"]))
                if is_slot_blocked(blocked, target["booking_date"], target["time_slot"], target["table_number"]):
                    raise HTTPException(
                        status_code=status.HTTP_409_CONFLICT,
                        detail=SLOT_BLOCKED_MESSAGE
                    )

        try:
            booking = await update_row("bookings", booking_id, fields, "Booking")
        except HTTPException:
            raise
        except Exception as e:
            if is_unique_violation(e, BOOKING_UNIQUE_INDEX):
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail="Another confirmed booking already holds this slot"
                )
            raise

        await query_cache.invalidate(cache.BOOKINGS, cache.BOOKING_AVAILABILITY)
        return booking

    @staticmethod
    async def delete_booking(booking_id: UUID) -> None:
        await delete_row("bookings", booking_id, "Booking")
        await query_cache.invalidate(cache.BOOKINGS, cache.BOOKING_AVAILABILITY)

    @staticmethod
    async def create_blocked_slot(data: CreateBlockedSlotRequest) -> dict:
        blocked = await database.fetch_one(
            """
            INSERT INTO blocked_slots (id, blocked_date, time_slot, table_number, reason)
            VALUES (:id, :blocked_date, :time_slot, :table_number, :reason)
            RETURNING *
            """,
            {
                "id": str(uuid4()),
                "blocked_date": data.blocked_date,
                "time_slot": data.time_slot,
                "table_number": data.table_number,
                "reason": data.reason
            }
        )
        await query_cache.invalidate(cache.BLOCKED_SLOTS, cache.BOOKING_AVAILABILITY)
        return dict(blocked)

    @staticmethod
    async def delete_blocked_slot(blocked_id: UUID) -> None:
        await delete_row("blocked_slots", blocked_id, "Blocked slot")
        await query_cache.invalidate(cache.BLOCKED_SLOTS, cache.BOOKING_AVAILABILITY)


# Create singleton instance
booking_service = BookingService()
