"""
Admin Service
Back-office accounts, first-admin bootstrap and dashboard statistics
"""

import logging
import uuid
from datetime import date
from typing import Iterable, Mapping, Optional

from fastapi import HTTPException, status

from cueclub.auth import hash_password, verify_password
from cueclub.config import settings
from cueclub.database import database
from cueclub.schemas.admin import SetupRequest, ChangePasswordRequest
from cueclub.services.availability import as_date
from cueclub.services.booking_service import booking_service, slot_sort_key
from cueclub.services.club_service import contact_service
from cueclub.services.media_service import gallery_service
from cueclub.services.pricing_service import pricing_service
from cueclub.services.tournament_service import tournament_service, ACTIVE_STATUSES

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def compute_dashboard_stats(
    bookings: Iterable[Mapping],
    tournaments: Iterable[Mapping],
    gallery: Iterable[Mapping],
    pricing: Iterable[Mapping],
    messages: Iterable[Mapping],
    today: Optional[date] = None,
    average_booking_value: Optional[int] = None
) -> dict:
    """Aggregate the dashboard from already-fetched lists"""
    today = today or date.today()
    if average_booking_value is None:
        average_booking_value = settings.AVERAGE_BOOKING_VALUE

    bookings = [dict(b) for b in bookings]
    tournaments = [dict(t) for t in tournaments]

    todays = [b for b in bookings if as_date(b["booking_date"]) == today]
    monthly = [
        b for b in bookings
        if as_date(b["booking_date"]).year == today.year
        and as_date(b["booking_date"]).month == today.month
    ]
    active_tournaments = sorted(
        (t for t in tournaments if t["status"] in ACTIVE_STATUSES),
        key=lambda t: as_date(t["date"])
    )
    upcoming_bookings = sorted(
        (b for b in bookings if b["status"] == "confirmed" and as_date(b["booking_date"]) >= today),
        key=slot_sort_key
    )

    return {
        "todays_bookings": len(todays),
        "monthly_bookings": len(monthly),
        "active_tournaments": len(active_tournaments),
        "gallery_images": len(list(gallery)),
        "pricing_plans": len(list(pricing)),
        "unread_messages": sum(1 for m in messages if not m["is_read"]),
        "estimated_monthly_revenue": len(monthly) * average_booking_value,
        "average_booking_value": average_booking_value,
        "upcoming_bookings": upcoming_bookings[:5],
        "upcoming_tournaments": active_tournaments[:3],
    }


class AdminService:
    """Service for admin accounts"""

    @staticmethod
    async def admin_exists() -> bool:
        count = await database.fetch_val(
            "SELECT COUNT(*) FROM user_roles WHERE role = :role",
            {"role": ADMIN_ROLE}
        )
        return (count or 0) > 0

    @staticmethod
    async def create_first_admin(data: SetupRequest) -> dict:
        """
        Create the first admin account and grant it the admin role

        Disabled once any admin role row exists.
        """
        if await AdminService.admin_exists():
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin setup has already been completed"
            )

        existing = await database.fetch_one(
            "SELECT id FROM admin_users WHERE email = :email",
            {"email": data.email}
        )
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Email '{data.email}' is already registered"
            )

        admin_id = str(uuid.uuid4())
        async with database.transaction():
            await database.execute(
                """
                INSERT INTO admin_users (id, email, password_hash, is_active)
                VALUES (:id, :email, :password_hash, TRUE)
                """,
                {
                    "id": admin_id,
                    "email": data.email,
                    "password_hash": hash_password(data.password)
                }
            )
            await database.execute(
                """
                INSERT INTO user_roles (id, user_id, role)
                VALUES (:id, :user_id, :role)
                """,
                {"id": str(uuid.uuid4()), "user_id": admin_id, "role": ADMIN_ROLE}
            )

        logger.info("First admin account created: %s", data.email)
        admin = await database.fetch_one(
            "SELECT id, email, is_active, last_login, created_at FROM admin_users WHERE id = :id",
            {"id": admin_id}
        )
        return dict(admin)

    @staticmethod
    async def authenticate(email: str, password: str) -> dict:
        """Check credentials and the admin role; returns the admin row"""
        admin = await database.fetch_one(
            """
            SELECT u.id, u.email, u.password_hash, u.is_active
            FROM admin_users u
            JOIN user_roles r ON r.user_id = u.id AND r.role = :role
            WHERE u.email = :email
            """,
            {"email": email, "role": ADMIN_ROLE}
        )

        if not admin or not verify_password(password, admin["password_hash"]):
            logger.warning("Failed admin login for %s", email)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password"
            )

        if not admin["is_active"]:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Account is deactivated."
            )

        await database.execute(
            "UPDATE admin_users SET last_login = NOW() WHERE id = :id",
            {"id": admin["id"]}
        )
        logger.info("Admin logged in: %s", email)
        return dict(admin)

    @staticmethod
    async def get_admin(admin_id: str) -> dict:
        admin = await database.fetch_one(
            "SELECT id, email, is_active, last_login, created_at FROM admin_users WHERE id = :id",
            {"id": admin_id}
        )
        if not admin:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Admin not found"
            )
        return dict(admin)

    @staticmethod
    async def change_password(admin_id: str, data: ChangePasswordRequest) -> None:
        if data.new_password != data.confirm_password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="New passwords do not match"
            )

        admin = await database.fetch_one(
            "SELECT password_hash FROM admin_users WHERE id = :id",
            {"id": admin_id}
        )
        if not admin or not verify_password(data.current_password, admin["password_hash"]):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Current password is incorrect"
            )

        await database.execute(
            """
            UPDATE admin_users
            SET password_hash = :password_hash,
                password_changed_at = NOW()
            WHERE id = :id
            """,
            {"password_hash": hash_password(data.new_password), "id": admin_id}
        )

    @staticmethod
    async def get_dashboard_stats(today: Optional[date] = None) -> dict:
        """Dashboard numbers, computed in memory over the full lists"""
        bookings = await booking_service.list_all_bookings()
        tournaments = await tournament_service.list_tournaments()
        gallery = await gallery_service.list_images()
        pricing = await pricing_service.list_all_plans()
        messages = await contact_service.list_messages()
        return compute_dashboard_stats(bookings, tournaments, gallery, pricing, messages, today=today)


# Create singleton instance
admin_service = AdminService()
