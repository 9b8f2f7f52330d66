"""
Seed club settings and starter pricing plans for a fresh database

Existing rows are left alone, so the script can be re-run safely.
"""

import asyncio
import logging

from cueclub.database import connect_db, disconnect_db
from cueclub.schemas.club import UpdateSettingsRequest
from cueclub.schemas.pricing import CreatePricingRequest
from cueclub.services.club_service import club_service
from cueclub.services.pricing_service import pricing_service

logger = logging.getLogger("seed_defaults")

DEFAULT_SETTINGS = {
    "club_name": "Cue Club",
    "address": "Sigra, Varanasi, Uttar Pradesh 221010, India",
    "opening_hours": "10:00 AM - 11:00 PM",
    "contact_number": "+91 9876543210",
    "whatsapp_number": "919876543210",
}

DEFAULT_PLANS = [
    {
        "title": "Hourly",
        "price": 300,
        "duration": "per hour",
        "features": ["Championship table", "Cue and chalk included"],
        "is_popular": True,
        "sort_order": 1,
    },
    {
        "title": "Half Day",
        "price": 1200,
        "duration": "5 hours",
        "features": ["Reserved table", "Complimentary tea and coffee"],
        "sort_order": 2,
    },
    {
        "title": "Monthly Membership",
        "price": 4500,
        "duration": "per month",
        "features": ["Priority booking", "Tournament entry discounts", "Locker"],
        "sort_order": 3,
    },
]


async def seed_defaults():
    await connect_db()

    try:
        if await club_service.get_settings():
            logger.info("Club settings already exist, skipping")
        else:
            await club_service.update_settings(UpdateSettingsRequest(**DEFAULT_SETTINGS))
            logger.info("Club settings created")

        if await pricing_service.list_all_plans():
            logger.info("Pricing plans already exist, skipping")
        else:
            for plan in DEFAULT_PLANS:
                await pricing_service.create_plan(CreatePricingRequest(**plan))
            logger.info("Created %d pricing plans", len(DEFAULT_PLANS))

    finally:
        await disconnect_db()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    asyncio.run(seed_defaults())
