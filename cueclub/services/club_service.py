"""
Club Service
Singleton club settings and contact form messages
"""

import logging
from typing import List, Optional
from uuid import UUID, uuid4

from fastapi import HTTPException, status

from cueclub.database import database
from cueclub.schemas.club import UpdateSettingsRequest, ContactMessageRequest
from cueclub.services import cache
from cueclub.services.cache import query_cache
from cueclub.services.crud import update_row, delete_row
from cueclub.services.links import with_links

logger = logging.getLogger(__name__)

REQUIRED_SETTINGS = ("club_name", "address", "opening_hours")


class ClubService:
    """Service for club settings"""

    @staticmethod
    async def get_settings() -> Optional[dict]:
        """The settings row with contact links, or None before first save"""

        async def fetch():
            row = await database.fetch_one("SELECT * FROM settings ORDER BY created_at LIMIT 1")
            return with_links(dict(row)) if row else None

        return await query_cache.get_or_fetch(cache.SETTINGS, fetch)

    @staticmethod
    async def update_settings(data: UpdateSettingsRequest) -> dict:
        """Update the settings row, creating it on first save"""
        fields = data.model_dump(exclude_unset=True)

        existing = await database.fetch_one("SELECT id FROM settings ORDER BY created_at LIMIT 1")
        if existing:
            row = await update_row("settings", existing["id"], fields, "Settings")
        else:
            missing = [name for name in REQUIRED_SETTINGS if not fields.get(name)]
            if missing:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Missing required settings: {', '.join(missing)}"
                )
            params = {
                "id": str(uuid4()),
                "contact_number": None,
                "whatsapp_number": None,
                "google_maps_link": None,
                **fields
            }
            row = await database.fetch_one(
                """
                INSERT INTO settings
                (id, club_name, address, opening_hours, contact_number, whatsapp_number, google_maps_link)
                VALUES (:id, :club_name, :address, :opening_hours, :contact_number, :whatsapp_number, :google_maps_link)
                RETURNING *
                """,
                params
            )
            row = dict(row)

        await query_cache.invalidate(cache.SETTINGS)
        return with_links(row)


class ContactService:
    """Service for contact form messages"""

    @staticmethod
    async def create_message(data: ContactMessageRequest) -> dict:
        message = await database.fetch_one(
            """
            INSERT INTO contact_messages (id, name, email, message, is_read)
            VALUES (:id, :name, :email, :message, FALSE)
            RETURNING *
            """,
            {
                "id": str(uuid4()),
                "name": data.name,
                "email": str(data.email),
                "message": data.message
            }
        )
        await query_cache.invalidate(cache.CONTACT_MESSAGES)
        return dict(message)

    @staticmethod
    async def list_messages() -> List[dict]:
        rows = await database.fetch_all("SELECT * FROM contact_messages ORDER BY created_at DESC")
        return [dict(r) for r in rows]

    @staticmethod
    async def mark_read(message_id: UUID) -> dict:
        message = await update_row(
            "contact_messages", message_id, {"is_read": True}, "Message",
            touch_updated_at=False
        )
        await query_cache.invalidate(cache.CONTACT_MESSAGES)
        return message

    @staticmethod
    async def delete_message(message_id: UUID) -> None:
        await delete_row("contact_messages", message_id, "Message")
        await query_cache.invalidate(cache.CONTACT_MESSAGES)


# Create singleton instances
club_service = ClubService()
contact_service = ContactService()
