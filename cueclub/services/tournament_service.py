"""
Tournament Service
Tournament management and public player registration
"""

import logging
from typing import List, Optional
from uuid import UUID, uuid4

from fastapi import HTTPException, status

from cueclub.database import database
from cueclub.schemas.tournament import CreateTournamentRequest, UpdateTournamentRequest, RegistrationRequest
from cueclub.services import cache
from cueclub.services.availability import as_date
from cueclub.services.cache import query_cache
from cueclub.services.crud import update_row, delete_row

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = ("upcoming", "ongoing")

_LIST_QUERY = """
    SELECT t.*, COUNT(r.id) AS registration_count
    FROM tournaments t
    LEFT JOIN tournament_registrations r ON r.tournament_id = t.id
    {where}
    GROUP BY t.id
    ORDER BY t.date ASC
"""


class TournamentService:
    """Service for tournament operations"""

    @staticmethod
    async def list_tournaments() -> List[dict]:
        """All tournaments, soonest first, with registration counts"""
        rows = await database.fetch_all(_LIST_QUERY.format(where=""))
        return [dict(r) for r in rows]

    @staticmethod
    async def list_active_tournaments() -> List[dict]:
        """Upcoming and ongoing tournaments for the public site"""

        async def fetch():
            rows = await database.fetch_all(
                _LIST_QUERY.format(where="WHERE t.status IN ('upcoming', 'ongoing')")
            )
            return [dict(r) for r in rows]

        rows = await query_cache.get_or_fetch(cache.TOURNAMENTS, fetch, key="active")
        # Cached rows carry ISO date strings; the page formats real dates
        return [{**t, "date": as_date(t["date"])} for t in rows]

    @staticmethod
    async def get_tournament(tournament_id: UUID) -> dict:
        tournament = await database.fetch_one(
            _LIST_QUERY.format(where="WHERE t.id = :id"),
            {"id": str(tournament_id)}
        )
        if not tournament:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Tournament not found"
            )
        return dict(tournament)

    @staticmethod
    async def create_tournament(data: CreateTournamentRequest) -> dict:
        tournament_id = str(uuid4())
        await database.execute(
            """
            INSERT INTO tournaments
            (id, tournament_name, date, description, entry_fee, prize_pool, max_participants, status)
            VALUES (:id, :tournament_name, :date, :description, :entry_fee, :prize_pool, :max_participants, :status)
            """,
            {"id": tournament_id, **data.model_dump()}
        )
        await query_cache.invalidate(cache.TOURNAMENTS)
        return await TournamentService.get_tournament(tournament_id)

    @staticmethod
    async def update_tournament(tournament_id: UUID, data: UpdateTournamentRequest) -> dict:
        await update_row("tournaments", tournament_id, data.model_dump(exclude_unset=True), "Tournament")
        await query_cache.invalidate(cache.TOURNAMENTS)
        return await TournamentService.get_tournament(tournament_id)

    @staticmethod
    async def delete_tournament(tournament_id: UUID) -> None:
        # Registrations go with it (ON DELETE CASCADE)
        await delete_row("tournaments", tournament_id, "Tournament")
        await query_cache.invalidate(cache.TOURNAMENTS, cache.TOURNAMENT_REGISTRATIONS)

    @staticmethod
    async def register_player(tournament_id: UUID, data: RegistrationRequest) -> dict:
        """
        Register a player for a tournament

        max_participants is informational only; organizers close
        registration by changing the tournament status.
        """
        tournament = await TournamentService.get_tournament(tournament_id)
        if tournament["status"] not in ACTIVE_STATUSES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Registration is closed for this tournament ({tournament['status']})"
            )

        registration = await database.fetch_one(
            """
            INSERT INTO tournament_registrations (id, tournament_id, player_name, phone_number, email)
            VALUES (:id, :tournament_id, :player_name, :phone_number, :email)
            RETURNING *
            """,
            {
                "id": str(uuid4()),
                "tournament_id": str(tournament_id),
                "player_name": data.player_name,
                "phone_number": data.phone_number,
                "email": str(data.email) if data.email else None
            }
        )
        logger.info("Registration for tournament %s: %s", tournament_id, data.player_name)
        await query_cache.invalidate(cache.TOURNAMENT_REGISTRATIONS, cache.TOURNAMENTS)
        return dict(registration)

    @staticmethod
    async def list_registrations(tournament_id: Optional[UUID] = None) -> List[dict]:
        if tournament_id is not None:
            rows = await database.fetch_all(
                """
                SELECT * FROM tournament_registrations
                WHERE tournament_id = :tournament_id
                ORDER BY created_at DESC
                """,
                {"tournament_id": str(tournament_id)}
            )
        else:
            rows = await database.fetch_all(
                "SELECT * FROM tournament_registrations ORDER BY created_at DESC"
            )
        return [dict(r) for r in rows]


# Create singleton instance
tournament_service = TournamentService()
