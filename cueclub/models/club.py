"""
Club Models
Singleton club settings and inbound contact messages
"""

from sqlalchemy import Column, String, Boolean, DateTime, Text, func
from sqlalchemy.dialects.postgresql import UUID
import uuid
from cueclub.database import Base


class ClubSettings(Base):
    __tablename__ = "settings"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    club_name = Column(String(100), nullable=False)
    address = Column(Text, nullable=False)
    opening_hours = Column(String(200), nullable=False)
    contact_number = Column(String(30), nullable=True)
    whatsapp_number = Column(String(30), nullable=True)
    google_maps_link = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
