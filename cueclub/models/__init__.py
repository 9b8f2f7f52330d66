"""
Database Models
Import all models here for Alembic migrations
"""

from cueclub.models.booking import Booking, BlockedSlot
from cueclub.models.tournament import Tournament, TournamentRegistration
from cueclub.models.pricing import PricingPlan
from cueclub.models.media import GalleryImage, SlideshowImage
from cueclub.models.club import ClubSettings, ContactMessage
from cueclub.models.admin import AdminUser, UserRole

__all__ = [
    "Booking",
    "BlockedSlot",
    "Tournament",
    "TournamentRegistration",
    "PricingPlan",
    "GalleryImage",
    "SlideshowImage",
    "ClubSettings",
    "ContactMessage",
    "AdminUser",
    "UserRole",
]
