"""
Pricing Request/Response Models
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from cueclub.schemas.common import reject_null


class CreatePricingRequest(BaseModel):
    """Request to add a pricing plan"""
    title: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0)
    duration: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, max_length=1000)
    features: List[str] = Field(default_factory=list)
    is_popular: bool = False
    active: bool = True
    sort_order: int = 0

    class Config:
        str_strip_whitespace = True
        json_schema_extra = {
            "example": {
                "title": "Hourly",
                "price": 300,
                "duration": "per hour",
                "features": ["Championship table", "Cue hire"],
                "is_popular": True
            }
        }


class UpdatePricingRequest(BaseModel):
    """Partial update, including the active / is_popular toggles"""
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[float] = Field(None, ge=0)
    duration: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, max_length=1000)
    features: Optional[List[str]] = None
    is_popular: Optional[bool] = None
    active: Optional[bool] = None
    sort_order: Optional[int] = None

    @field_validator("title", "price", "features", "is_popular", "active", "sort_order")
    @classmethod
    def validate_not_null(cls, value):
        return reject_null(value)

    class Config:
        str_strip_whitespace = True


class PricingResponse(BaseModel):
    id: UUID
    title: str
    price: float
    duration: Optional[str] = None
    description: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    is_popular: bool = False
    active: bool = True
    sort_order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
