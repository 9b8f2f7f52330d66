"""
Media Models
Gallery images and hero slideshow images
"""

from sqlalchemy import Column, String, Integer, Boolean, DateTime, Text, func
from sqlalchemy.dialects.postgresql import UUID
import uuid
from cueclub.database import Base


class GalleryImage(Base):
    __tablename__ = "gallery"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    image_url = Column(Text, nullable=False)
    caption = Column(String(200), nullable=True)
    order_index = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class SlideshowImage(Base):
    __tablename__ = "slideshow"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    image_url = Column(Text, nullable=False)
    tagline = Column(String(200), nullable=True)
    order_index = Column(Integer, default=0)
    active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
