"""
Booking Models
Table reservations and admin-defined blocked slots
"""

from sqlalchemy import (
    Column, String, Integer, Date, DateTime, Text, CheckConstraint, Index, func, text
)
from sqlalchemy.dialects.postgresql import UUID
import uuid
from cueclub.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Customer
    user_name = Column(String(100), nullable=False)
    phone_number = Column(String(20), nullable=False)

    # Slot
    booking_date = Column(Date, nullable=False, index=True)
    time_slot = Column(String(20), nullable=False)
    table_number = Column(Integer, nullable=False)

    # 'confirmed', 'cancelled' or 'completed'
    status = Column(String(20), nullable=False, default="confirmed", server_default="confirmed")
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint(
            "status IN ('confirmed', 'cancelled', 'completed')",
            name="ck_bookings_status"
        ),
        CheckConstraint("table_number BETWEEN 1 AND 6", name="ck_bookings_table_number"),
        # Only one confirmed booking may hold a slot
        Index(
            "unique_booking",
            "booking_date", "time_slot", "table_number",
            unique=True,
            postgresql_where=text("status = 'confirmed'")
        ),
    )


class BlockedSlot(Base):
    __tablename__ = "blocked_slots"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    blocked_date = Column(Date, nullable=False, index=True)

    # NULL means every time slot / every table on that date
    time_slot = Column(String(20), nullable=True)
    table_number = Column(Integer, nullable=True)

    reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
