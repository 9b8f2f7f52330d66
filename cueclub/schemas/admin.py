"""
Admin Request/Response Models
Authentication, bootstrap and dashboard
"""

from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from cueclub.schemas.booking import BookingResponse
from cueclub.schemas.tournament import TournamentResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    status: str
    message: str
    access_token: str
    token_type: str = "bearer"
    email: str


class SetupRequest(BaseModel):
    """One-time creation of the first admin account"""
    email: EmailStr
    password: str = Field(..., min_length=6)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class SetupStatusResponse(BaseModel):
    admin_exists: bool


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=8)
    confirm_password: str


class AdminUserResponse(BaseModel):
    id: UUID
    email: str
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None


class AdminDashboardResponse(BaseModel):
    """Headline numbers for the admin dashboard"""
    todays_bookings: int
    monthly_bookings: int
    active_tournaments: int
    gallery_images: int
    pricing_plans: int
    unread_messages: int
    estimated_monthly_revenue: int
    average_booking_value: int
    upcoming_bookings: List[BookingResponse]
    upcoming_tournaments: List[TournamentResponse]
