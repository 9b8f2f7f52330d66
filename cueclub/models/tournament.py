"""
Tournament Models
Tournaments and player registrations
"""

from sqlalchemy import Column, String, Integer, Date, DateTime, Numeric, Text, ForeignKey, CheckConstraint, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
from cueclub.database import Base


class Tournament(Base):
    __tablename__ = "tournaments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    tournament_name = Column(String(200), nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=True)

    entry_fee = Column(Numeric(10, 2), nullable=True)
    prize_pool = Column(String(100), nullable=True)
    # Displayed only; registrations are not capped against it
    max_participants = Column(Integer, nullable=True)

    status = Column(String(20), nullable=False, default="upcoming", server_default="upcoming")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint(
            "status IN ('upcoming', 'ongoing', 'completed', 'cancelled')",
            name="ck_tournaments_status"
        ),
    )


class TournamentRegistration(Base):
    __tablename__ = "tournament_registrations"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    tournament_id = Column(
        UUID(as_uuid=True), ForeignKey("tournaments.id", ondelete="CASCADE"), nullable=False, index=True
    )

    player_name = Column(String(100), nullable=False)
    phone_number = Column(String(20), nullable=False)
    email = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationship
    tournament = relationship("Tournament", backref="registrations")
