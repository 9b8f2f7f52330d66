"""
Booking Request/Response Models
Public booking flow, availability grid and admin booking management
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, Literal, List
from datetime import date, datetime, timedelta
from uuid import UUID

from cueclub.config import settings
from cueclub.schemas.common import reject_null
from cueclub.services.availability import TIME_SLOTS, TABLES

BookingStatus = Literal["confirmed", "cancelled", "completed"]
BookingFilter = Literal["all", "today", "upcoming", "confirmed", "cancelled"]


def _check_time_slot(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in TIME_SLOTS:
        raise ValueError(f"Unknown time slot '{value}'")
    return value


class CreateBookingRequest(BaseModel):
    """Public table booking"""
    booking_date: date = Field(..., description="Date of play (YYYY-MM-DD)")
    time_slot: str = Field(..., description="One of the club's hourly slots, e.g. '5:00 PM'")
    table_number: int = Field(..., ge=min(TABLES), le=max(TABLES))
    user_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=20)

    @field_validator("time_slot")
    @classmethod
    def validate_time_slot(cls, value: str) -> str:
        return _check_time_slot(value)

    @field_validator("booking_date")
    @classmethod
    def validate_booking_window(cls, value: date) -> date:
        today = date.today()
        last_day = today + timedelta(days=settings.BOOKING_WINDOW_DAYS - 1)
        if value < today or value > last_day:
            raise ValueError(
                f"Bookings are open from {today.isoformat()} to {last_day.isoformat()}"
            )
        return value

    class Config:
        str_strip_whitespace = True
        json_schema_extra = {
            "example": {
                "booking_date": "2025-06-01",
                "time_slot": "5:00 PM",
                "table_number": 3,
                "user_name": "Ronnie",
                "phone_number": "+91 98765 43210"
            }
        }


class UpdateBookingRequest(BaseModel):
    """Admin edits to a booking; omitted fields are left unchanged"""
    status: Optional[BookingStatus] = None
    notes: Optional[str] = Field(None, max_length=1000)
    user_name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone_number: Optional[str] = Field(None, min_length=1, max_length=20)
    booking_date: Optional[date] = None
    time_slot: Optional[str] = None
    table_number: Optional[int] = Field(None, ge=min(TABLES), le=max(TABLES))

    @field_validator("status", "user_name", "phone_number", "booking_date", "time_slot", "table_number")
    @classmethod
    def validate_not_null(cls, value):
        return reject_null(value)

    @field_validator("time_slot")
    @classmethod
    def validate_time_slot(cls, value: Optional[str]) -> Optional[str]:
        return _check_time_slot(value)

    class Config:
        str_strip_whitespace = True


class BookingResponse(BaseModel):
    """Booking details (admin)"""
    id: UUID
    user_name: str
    phone_number: str
    booking_date: date
    time_slot: str
    table_number: int
    status: BookingStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BookingConfirmationResponse(BaseModel):
    """Summary shown after a successful public booking"""
    booking_id: UUID
    booking_date: date
    date_label: str
    time_slot: str
    table_number: int
    user_name: str
    status: BookingStatus
    reset_after_seconds: int


class BookingListResponse(BaseModel):
    """Filtered bookings plus headline counts over the full list"""
    total: int
    today_count: int
    confirmed_count: int
    cancelled_count: int
    bookings: List[BookingResponse]


class SlotAvailability(BaseModel):
    """Free tables for one time slot"""
    time_slot: str
    available_tables: List[int]
    available_count: int
    is_full: bool


class DayAvailabilityResponse(BaseModel):
    """Availability grid for one date (no customer details)"""
    date: date
    tables: List[int]
    slots: List[SlotAvailability]


class CreateBlockedSlotRequest(BaseModel):
    """Admin exclusion rule; leave time_slot / table_number empty to block all"""
    blocked_date: date
    time_slot: Optional[str] = None
    table_number: Optional[int] = Field(None, ge=min(TABLES), le=max(TABLES))
    reason: Optional[str] = Field(None, max_length=255)

    @field_validator("time_slot")
    @classmethod
    def validate_time_slot(cls, value: Optional[str]) -> Optional[str]:
        return _check_time_slot(value or None)


class BlockedSlotResponse(BaseModel):
    id: UUID
    blocked_date: date
    time_slot: Optional[str] = None
    table_number: Optional[int] = None
    reason: Optional[str] = None
    created_at: Optional[datetime] = None
