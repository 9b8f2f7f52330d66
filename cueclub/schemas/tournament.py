"""
Tournament Request/Response Models
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, Literal, List
from datetime import date as date_type, datetime
from uuid import UUID

from cueclub.schemas.common import reject_null

TournamentStatus = Literal["upcoming", "ongoing", "completed", "cancelled"]

PHONE_PATTERN = r"^[+]?[0-9\s()-]{7,20}$"


class CreateTournamentRequest(BaseModel):
    """Request to create a tournament"""
    tournament_name: str = Field(..., min_length=1, max_length=200)
    date: date_type
    description: Optional[str] = Field(None, max_length=2000)
    entry_fee: Optional[float] = Field(None, ge=0)
    prize_pool: Optional[str] = Field(None, max_length=100)
    max_participants: Optional[int] = Field(None, ge=1)
    status: TournamentStatus = "upcoming"

    class Config:
        str_strip_whitespace = True


class UpdateTournamentRequest(BaseModel):
    """Request to update tournament details"""
    tournament_name: Optional[str] = Field(None, min_length=1, max_length=200)
    date: Optional[date_type] = None
    description: Optional[str] = Field(None, max_length=2000)
    entry_fee: Optional[float] = Field(None, ge=0)
    prize_pool: Optional[str] = Field(None, max_length=100)
    max_participants: Optional[int] = Field(None, ge=1)
    status: Optional[TournamentStatus] = None

    @field_validator("tournament_name", "date", "status")
    @classmethod
    def validate_not_null(cls, value):
        return reject_null(value)

    class Config:
        str_strip_whitespace = True


class TournamentResponse(BaseModel):
    """Tournament details"""
    id: UUID
    tournament_name: str
    date: date_type
    description: Optional[str] = None
    entry_fee: Optional[float] = None
    prize_pool: Optional[str] = None
    max_participants: Optional[int] = None
    status: TournamentStatus
    registration_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RegistrationRequest(BaseModel):
    """Public tournament sign-up"""
    player_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., pattern=PHONE_PATTERN)
    email: Optional[EmailStr] = None

    @field_validator("email", mode="before")
    @classmethod
    def empty_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    class Config:
        str_strip_whitespace = True


class RegistrationResponse(BaseModel):
    id: UUID
    tournament_id: UUID
    player_name: str
    phone_number: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None


class RegistrationListResponse(BaseModel):
    total: int
    registrations: List[RegistrationResponse]
