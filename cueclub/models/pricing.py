"""
Pricing Model
Rate cards shown in the public pricing section
"""

from sqlalchemy import Column, String, Integer, Boolean, DateTime, Numeric, Text, func
from sqlalchemy.dialects.postgresql import UUID, ARRAY
import uuid
from cueclub.database import Base


class PricingPlan(Base):
    __tablename__ = "pricing"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(100), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    duration = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    features = Column(ARRAY(Text), nullable=False, server_default="{}")

    is_popular = Column(Boolean, default=False)
    active = Column(Boolean, default=True)
    sort_order = Column(Integer, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
