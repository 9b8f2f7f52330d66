"""
Public Endpoints
Reference data for the club site, table booking, tournament sign-up and contact
"""

from datetime import date
from typing import List
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from cueclub.config import settings
from cueclub.schemas.booking import CreateBookingRequest, BookingConfirmationResponse, DayAvailabilityResponse
from cueclub.schemas.club import SettingsResponse, ContactMessageRequest
from cueclub.schemas.media import GalleryImageResponse, SlideResponse
from cueclub.schemas.pricing import PricingResponse
from cueclub.schemas.tournament import TournamentResponse, RegistrationRequest, RegistrationResponse
from cueclub.services.availability import TIME_SLOTS, TABLES, booking_dates
from cueclub.services.booking_service import booking_service
from cueclub.services.club_service import club_service, contact_service
from cueclub.services.media_service import gallery_service, slideshow_service
from cueclub.services.pricing_service import pricing_service
from cueclub.services.tournament_service import tournament_service

router = APIRouter()


@router.get("/settings", response_model=SettingsResponse)
async def get_club_settings():
    """Club details with WhatsApp, phone and directions links"""
    club = await club_service.get_settings()
    if not club:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Club settings have not been configured yet"
        )
    return club


@router.get("/pricing", response_model=List[PricingResponse])
async def list_pricing():
    """Active pricing plans"""
    return await pricing_service.list_active_plans()


@router.get("/tournaments", response_model=List[TournamentResponse])
async def list_tournaments():
    """Upcoming and ongoing tournaments"""
    return await tournament_service.list_active_tournaments()


@router.post(
    "/tournaments/{tournament_id}/registrations",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED
)
async def register_for_tournament(tournament_id: UUID, request: RegistrationRequest):
    """
    Register a player for a tournament

    - **player_name**: 1-100 characters
    - **phone_number**: digits, spaces, brackets, dashes and an optional leading +
    - **email**: optional
    """
    return await tournament_service.register_player(tournament_id, request)


@router.get("/gallery", response_model=List[GalleryImageResponse])
async def list_gallery():
    return await gallery_service.list_images()


@router.get("/slideshow", response_model=List[SlideResponse])
async def list_slideshow():
    return await slideshow_service.list_active_slides()


@router.get("/bookings/dates")
async def list_booking_dates():
    """Bookable dates and the fixed slot / table layout"""
    return {
        "dates": booking_dates(days=settings.BOOKING_WINDOW_DAYS),
        "time_slots": TIME_SLOTS,
        "tables": TABLES
    }


@router.get("/bookings/availability", response_model=DayAvailabilityResponse)
async def get_availability(booking_date: date = Query(..., alias="date")):
    """
    Free tables per time slot for one date

    Only slot status is exposed, never who booked it.
    """
    if booking_date not in booking_dates(days=settings.BOOKING_WINDOW_DAYS):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Availability is only shown for dates open for booking"
        )
    return await booking_service.get_day_availability(booking_date)


@router.post("/bookings", response_model=BookingConfirmationResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(request: CreateBookingRequest):
    """
    Book a table

    Returns 409 when the slot was taken in the meantime or is blocked by the club.
    """
    booking = await booking_service.create_booking(request)
    return booking_service.confirmation_summary(booking)


@router.post("/contact", status_code=status.HTTP_201_CREATED)
async def send_contact_message(request: ContactMessageRequest):
    await contact_service.create_message(request)
    return {
        "status": "success",
        "message": "Thanks for getting in touch. We'll get back to you soon."
    }
