"""
Club Admin Routes
Back-office endpoints: dashboard, bookings, tournaments, pricing, media, messages and settings
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status, Query, UploadFile, File, Form

from cueclub.auth import get_admin
from cueclub.schemas.admin import AdminDashboardResponse
from cueclub.schemas.booking import (
    BookingFilter,
    UpdateBookingRequest,
    BookingResponse,
    BookingListResponse,
    CreateBlockedSlotRequest,
    BlockedSlotResponse,
)
from cueclub.schemas.club import (
    UpdateSettingsRequest,
    SettingsResponse,
    ContactMessageResponse,
    ContactMessageListResponse,
)
from cueclub.schemas.media import (
    CreateGalleryImageRequest,
    UpdateGalleryImageRequest,
    GalleryImageResponse,
    UpdateSlideRequest,
    SlideResponse,
)
from cueclub.schemas.pricing import CreatePricingRequest, UpdatePricingRequest, PricingResponse
from cueclub.schemas.tournament import (
    CreateTournamentRequest,
    UpdateTournamentRequest,
    TournamentResponse,
    RegistrationListResponse,
)
from cueclub.services.admin_service import admin_service
from cueclub.services.booking_service import booking_service, filter_bookings, booking_counts
from cueclub.services.club_service import club_service, contact_service
from cueclub.services.media_service import gallery_service, slideshow_service
from cueclub.services.pricing_service import pricing_service
from cueclub.services.tournament_service import tournament_service

router = APIRouter()


@router.get("/dashboard", response_model=AdminDashboardResponse)
async def get_admin_dashboard(
    current_admin: dict = Depends(get_admin)
):
    """
    Club dashboard stats

    Booking counts, active tournaments, content totals, unread messages
    and an estimated monthly revenue.
    """
    return await admin_service.get_dashboard_stats()


# Bookings

@router.get("/bookings", response_model=BookingListResponse)
async def list_bookings(
    filter: BookingFilter = Query("all", description="all, today, upcoming, confirmed or cancelled"),
    search: Optional[str] = Query(None, description="Customer name or phone number"),
    current_admin: dict = Depends(get_admin)
):
    """
    List bookings, newest date first

    Counts are over all bookings, independent of the filter.
    """
    bookings = await booking_service.list_all_bookings()
    rows = filter_bookings(bookings, filter, search)
    return {
        "total": len(rows),
        **booking_counts(bookings),
        "bookings": rows
    }


@router.get("/bookings/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    return await booking_service.get_booking(booking_id)


@router.patch("/bookings/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: UUID,
    request: UpdateBookingRequest,
    current_admin: dict = Depends(get_admin)
):
    """
    Update a booking (status, notes or details)

    Returns 409 if the change would double-book a confirmed slot.
    """
    return await booking_service.update_booking(booking_id, request)


@router.delete("/bookings/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_booking(
    booking_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    await booking_service.delete_booking(booking_id)
    return None


# Blocked slots

@router.get("/blocked-slots", response_model=List[BlockedSlotResponse])
async def list_blocked_slots(
    blocked_date: Optional[date] = Query(None, alias="date"),
    current_admin: dict = Depends(get_admin)
):
    return await booking_service.list_blocked_slots(blocked_date)


@router.post("/blocked-slots", response_model=BlockedSlotResponse, status_code=status.HTTP_201_CREATED)
async def create_blocked_slot(
    request: CreateBlockedSlotRequest,
    current_admin: dict = Depends(get_admin)
):
    """
    Block a date, a slot or a single table

    - **time_slot**: omit to block every slot of the day
    - **table_number**: omit to block every table
    """
    return await booking_service.create_blocked_slot(request)


@router.delete("/blocked-slots/{blocked_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blocked_slot(
    blocked_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    await booking_service.delete_blocked_slot(blocked_id)
    return None


# Tournaments

@router.get("/tournaments", response_model=List[TournamentResponse])
async def list_tournaments(
    current_admin: dict = Depends(get_admin)
):
    return await tournament_service.list_tournaments()


@router.post("/tournaments", response_model=TournamentResponse, status_code=status.HTTP_201_CREATED)
async def create_tournament(
    request: CreateTournamentRequest,
    current_admin: dict = Depends(get_admin)
):
    return await tournament_service.create_tournament(request)


@router.patch("/tournaments/{tournament_id}", response_model=TournamentResponse)
async def update_tournament(
    tournament_id: UUID,
    request: UpdateTournamentRequest,
    current_admin: dict = Depends(get_admin)
):
    return await tournament_service.update_tournament(tournament_id, request)


@router.delete("/tournaments/{tournament_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tournament(
    tournament_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    """
    Delete a tournament and its registrations
    """
    await tournament_service.delete_tournament(tournament_id)
    return None


@router.get("/tournaments/{tournament_id}/registrations", response_model=RegistrationListResponse)
async def list_tournament_registrations(
    tournament_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    await tournament_service.get_tournament(tournament_id)
    registrations = await tournament_service.list_registrations(tournament_id)
    return {"total": len(registrations), "registrations": registrations}


@router.get("/registrations", response_model=RegistrationListResponse)
async def list_registrations(
    tournament_id: Optional[UUID] = Query(None, description="Limit to one tournament"),
    current_admin: dict = Depends(get_admin)
):
    registrations = await tournament_service.list_registrations(tournament_id)
    return {"total": len(registrations), "registrations": registrations}


# Pricing

@router.get("/pricing", response_model=List[PricingResponse])
async def list_pricing_plans(
    current_admin: dict = Depends(get_admin)
):
    """All plans, including inactive ones"""
    return await pricing_service.list_all_plans()


@router.post("/pricing", response_model=PricingResponse, status_code=status.HTTP_201_CREATED)
async def create_pricing_plan(
    request: CreatePricingRequest,
    current_admin: dict = Depends(get_admin)
):
    return await pricing_service.create_plan(request)


@router.patch("/pricing/{plan_id}", response_model=PricingResponse)
async def update_pricing_plan(
    plan_id: UUID,
    request: UpdatePricingRequest,
    current_admin: dict = Depends(get_admin)
):
    return await pricing_service.update_plan(plan_id, request)


@router.delete("/pricing/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pricing_plan(
    plan_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    await pricing_service.delete_plan(plan_id)
    return None


# Gallery

@router.get("/gallery", response_model=List[GalleryImageResponse])
async def list_gallery_images(
    current_admin: dict = Depends(get_admin)
):
    return await gallery_service.list_images()


@router.post("/gallery", response_model=GalleryImageResponse, status_code=status.HTTP_201_CREATED)
async def add_gallery_image(
    request: CreateGalleryImageRequest,
    current_admin: dict = Depends(get_admin)
):
    """Add an image that is already hosted elsewhere"""
    return await gallery_service.add_image(request)


@router.post("/gallery/upload", response_model=GalleryImageResponse, status_code=status.HTTP_201_CREATED)
async def upload_gallery_image(
    image: UploadFile = File(...),
    caption: Optional[str] = Form(None),
    current_admin: dict = Depends(get_admin)
):
    """
    Upload an image file to the gallery

    The image is resized and re-encoded before it is stored.
    """
    content = await image.read()
    return await gallery_service.upload_image(content, image.content_type, caption)


@router.patch("/gallery/{image_id}", response_model=GalleryImageResponse)
async def update_gallery_image(
    image_id: UUID,
    request: UpdateGalleryImageRequest,
    current_admin: dict = Depends(get_admin)
):
    return await gallery_service.update_image(image_id, request)


@router.delete("/gallery/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_gallery_image(
    image_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    """Remove the stored file, then the gallery entry"""
    await gallery_service.delete_image(image_id)
    return None


# Slideshow

@router.get("/slideshow", response_model=List[SlideResponse])
async def list_slides(
    current_admin: dict = Depends(get_admin)
):
    return await slideshow_service.list_all_slides()


@router.post("/slideshow", response_model=SlideResponse, status_code=status.HTTP_201_CREATED)
async def upload_slide(
    image: UploadFile = File(...),
    tagline: Optional[str] = Form(None),
    current_admin: dict = Depends(get_admin)
):
    content = await image.read()
    return await slideshow_service.upload_slide(content, image.content_type, tagline)


@router.patch("/slideshow/{slide_id}", response_model=SlideResponse)
async def update_slide(
    slide_id: UUID,
    request: UpdateSlideRequest,
    current_admin: dict = Depends(get_admin)
):
    return await slideshow_service.update_slide(slide_id, request)


@router.delete("/slideshow/{slide_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_slide(
    slide_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    await slideshow_service.delete_slide(slide_id)
    return None


# Contact messages

@router.get("/messages", response_model=ContactMessageListResponse)
async def list_messages(
    unread_only: bool = Query(False),
    current_admin: dict = Depends(get_admin)
):
    messages = await contact_service.list_messages()
    unread = [m for m in messages if not m["is_read"]]
    return {
        "total": len(messages),
        "unread_count": len(unread),
        "messages": unread if unread_only else messages
    }


@router.patch("/messages/{message_id}/read", response_model=ContactMessageResponse)
async def mark_message_read(
    message_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    return await contact_service.mark_read(message_id)


@router.delete("/messages/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(
    message_id: UUID,
    current_admin: dict = Depends(get_admin)
):
    await contact_service.delete_message(message_id)
    return None


# Settings

@router.get("/settings", response_model=SettingsResponse)
async def get_settings(
    current_admin: dict = Depends(get_admin)
):
    club = await club_service.get_settings()
    if not club:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Club settings have not been configured yet"
        )
    return club


@router.put("/settings", response_model=SettingsResponse)
async def update_settings(
    request: UpdateSettingsRequest,
    current_admin: dict = Depends(get_admin)
):
    """
    Save club settings

    The first save must include club_name, address and opening_hours.
    """
    return await club_service.update_settings(request)
