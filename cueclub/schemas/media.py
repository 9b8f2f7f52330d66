"""
Gallery and Slideshow Request/Response Models
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from cueclub.schemas.common import reject_null


class CreateGalleryImageRequest(BaseModel):
    """Add a gallery image by public URL"""
    image_url: str = Field(..., min_length=1, max_length=2000)
    caption: Optional[str] = Field(None, max_length=200)

    class Config:
        str_strip_whitespace = True


class UpdateGalleryImageRequest(BaseModel):
    caption: Optional[str] = Field(None, max_length=200)
    order_index: Optional[int] = Field(None, ge=0)

    @field_validator("order_index")
    @classmethod
    def validate_not_null(cls, value):
        return reject_null(value)


class GalleryImageResponse(BaseModel):
    id: UUID
    image_url: str
    caption: Optional[str] = None
    order_index: int = 0
    created_at: Optional[datetime] = None


class UpdateSlideRequest(BaseModel):
    tagline: Optional[str] = Field(None, max_length=200)
    active: Optional[bool] = None

    @field_validator("active")
    @classmethod
    def validate_not_null(cls, value):
        return reject_null(value)


class SlideResponse(BaseModel):
    id: UUID
    image_url: str
    tagline: Optional[str] = None
    order_index: int = 0
    active: bool = True
    created_at: Optional[datetime] = None
