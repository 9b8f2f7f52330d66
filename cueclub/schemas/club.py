"""
Club Settings and Contact Message Models
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from cueclub.schemas.common import reject_null


class UpdateSettingsRequest(BaseModel):
    """Update club settings; omitted fields keep their stored value"""
    club_name: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    opening_hours: Optional[str] = Field(None, min_length=1, max_length=200)
    contact_number: Optional[str] = Field(None, max_length=30)
    whatsapp_number: Optional[str] = Field(None, max_length=30)
    google_maps_link: Optional[str] = Field(None, max_length=2000)

    @field_validator("club_name", "address", "opening_hours")
    @classmethod
    def validate_not_null(cls, value):
        return reject_null(value)

    class Config:
        str_strip_whitespace = True


class SettingsResponse(BaseModel):
    """Club settings with computed contact links"""
    id: UUID
    club_name: str
    address: str
    opening_hours: str
    contact_number: Optional[str] = None
    whatsapp_number: Optional[str] = None
    google_maps_link: Optional[str] = None
    whatsapp_url: str
    phone_url: Optional[str] = None
    directions_url: Optional[str] = None
    map_embed_url: Optional[str] = None
    updated_at: Optional[datetime] = None


class ContactMessageRequest(BaseModel):
    """Public contact form"""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=2000)

    class Config:
        str_strip_whitespace = True


class ContactMessageResponse(BaseModel):
    id: UUID
    name: str
    email: str
    message: str
    is_read: bool = False
    created_at: Optional[datetime] = None


class ContactMessageListResponse(BaseModel):
    total: int
    unread_count: int
    messages: List[ContactMessageResponse]
