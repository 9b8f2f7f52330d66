"""
Pydantic schemas for request/response validation
"""

from cueclub.schemas.booking import (
    CreateBookingRequest,
    UpdateBookingRequest,
    BookingResponse,
    BookingConfirmationResponse,
    BookingListResponse,
    DayAvailabilityResponse,
    CreateBlockedSlotRequest,
    BlockedSlotResponse,
)
from cueclub.schemas.tournament import (
    CreateTournamentRequest,
    UpdateTournamentRequest,
    TournamentResponse,
    RegistrationRequest,
    RegistrationResponse,
)
from cueclub.schemas.pricing import CreatePricingRequest, UpdatePricingRequest, PricingResponse
from cueclub.schemas.club import (
    UpdateSettingsRequest,
    SettingsResponse,
    ContactMessageRequest,
    ContactMessageResponse,
)

__all__ = [
    "CreateBookingRequest",
    "UpdateBookingRequest",
    "BookingResponse",
    "BookingConfirmationResponse",
    "BookingListResponse",
    "DayAvailabilityResponse",
    "CreateBlockedSlotRequest",
    "BlockedSlotResponse",
    "CreateTournamentRequest",
    "UpdateTournamentRequest",
    "TournamentResponse",
    "RegistrationRequest",
    "RegistrationResponse",
    "CreatePricingRequest",
    "UpdatePricingRequest",
    "PricingResponse",
    "UpdateSettingsRequest",
    "SettingsResponse",
    "ContactMessageRequest",
    "ContactMessageResponse",
]
