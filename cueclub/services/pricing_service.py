"""
Pricing Service
"""

from typing import List
from uuid import UUID, uuid4

from cueclub.database import database
from cueclub.schemas.pricing import CreatePricingRequest, UpdatePricingRequest
from cueclub.services import cache
from cueclub.services.cache import query_cache
from cueclub.services.crud import update_row, delete_row


class PricingService:
    """Service for pricing plan operations"""

    @staticmethod
    async def list_active_plans() -> List[dict]:
        """Active plans in display order (public)"""

        async def fetch():
            rows = await database.fetch_all(
                "SELECT * FROM pricing WHERE active = TRUE ORDER BY sort_order ASC"
            )
            return [dict(r) for r in rows]

        return await query_cache.get_or_fetch(cache.PRICING, fetch, key="active")

    @staticmethod
    async def list_all_plans() -> List[dict]:
        rows = await database.fetch_all("SELECT * FROM pricing ORDER BY sort_order ASC")
        return [dict(r) for r in rows]

    @staticmethod
    async def create_plan(data: CreatePricingRequest) -> dict:
        plan = await database.fetch_one(
            """
            INSERT INTO pricing
            (id, title, price, duration, description, features, is_popular, active, sort_order)
            VALUES (:id, :title, :price, :duration, :description, :features, :is_popular, :active, :sort_order)
            RETURNING *
            """,
            {"id": str(uuid4()), **data.model_dump()}
        )
        await query_cache.invalidate(cache.PRICING)
        return dict(plan)

    @staticmethod
    async def update_plan(plan_id: UUID, data: UpdatePricingRequest) -> dict:
        plan = await update_row("pricing", plan_id, data.model_dump(exclude_unset=True), "Pricing plan")
        await query_cache.invalidate(cache.PRICING)
        return plan

    @staticmethod
    async def delete_plan(plan_id: UUID) -> None:
        await delete_row("pricing", plan_id, "Pricing plan")
        await query_cache.invalidate(cache.PRICING)


# Create singleton instance
pricing_service = PricingService()
