"""
Media Service
Gallery and slideshow images backed by Supabase Storage
"""

import logging
import time
import uuid
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, status

from cueclub.config import settings
from cueclub.database import database
from cueclub.schemas.media import CreateGalleryImageRequest, UpdateGalleryImageRequest, UpdateSlideRequest
from cueclub.services import cache
from cueclub.services.cache import query_cache
from cueclub.services.crud import fetch_row, update_row, delete_row
from cueclub.services.image_optimizer import image_optimizer
from cueclub.services.storage_service import StorageService

logger = logging.getLogger(__name__)


async def store_image(content: bytes, content_type: Optional[str], prefix: str) -> str:
    """
    Validate, optimize and upload an image; returns its public URL

    Raises 400 for a bad file and 502 when the upload itself fails.
    """
    if (content_type or "") not in settings.allowed_image_types:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported image type. Allowed: {settings.ALLOWED_IMAGE_TYPES}"
        )
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty")
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Image is larger than {settings.MAX_UPLOAD_SIZE // (1024 * 1024)} MB"
        )
    if not image_optimizer.is_image(content):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File is not a valid image")

    optimized, optimized_type, ext = image_optimizer.optimize(content, content_type)
    logger.debug(
        "Optimized %s upload: %s",
        prefix, image_optimizer.get_size_reduction(len(content), len(optimized))
    )

    path = f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{ext}"
    return await StorageService.upload_bytes(path, optimized, optimized_type)


async def _discard_upload(image_url: str) -> None:
    """Remove an uploaded object whose database row could not be written"""
    try:
        await StorageService.delete_by_url(image_url)
    except HTTPException as e:
        logger.error("Could not remove orphaned upload %s: %s", image_url, e.detail)


def _record_failed(e: Exception) -> HTTPException:
    logger.exception("Saving image record failed: %s", e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Image uploaded but saving the record failed"
    )


class GalleryService:
    """Service for gallery images"""

    @staticmethod
    async def list_images() -> List[dict]:
        async def fetch():
            rows = await database.fetch_all("SELECT * FROM gallery ORDER BY order_index ASC")
            return [dict(r) for r in rows]

        return await query_cache.get_or_fetch(cache.GALLERY, fetch)

    @staticmethod
    async def _insert(image_url: str, caption: Optional[str]) -> dict:
        # New images go to the end of the display order
        image = await database.fetch_one(
            """
            INSERT INTO gallery (id, image_url, caption, order_index)
            VALUES (
                :id, :image_url, :caption,
                (SELECT COALESCE(MAX(order_index), -1) + 1 FROM gallery)
            )
            RETURNING *
            """,
            {"id": str(uuid.uuid4()), "image_url": image_url, "caption": caption}
        )
        await query_cache.invalidate(cache.GALLERY)
        return dict(image)

    @staticmethod
    async def add_image(data: CreateGalleryImageRequest) -> dict:
        """Add an image by URL"""
        return await GalleryService._insert(data.image_url, data.caption or None)

    @staticmethod
    async def upload_image(content: bytes, content_type: Optional[str], caption: Optional[str] = None) -> dict:
        image_url = await store_image(content, content_type, "gallery")
        try:
            return await GalleryService._insert(image_url, caption or None)
        except Exception as e:
            await _discard_upload(image_url)
            raise _record_failed(e)

    @staticmethod
    async def update_image(image_id: UUID, data: UpdateGalleryImageRequest) -> dict:
        image = await update_row(
            "gallery", image_id, data.model_dump(exclude_unset=True), "Gallery image",
            touch_updated_at=False
        )
        await query_cache.invalidate(cache.GALLERY)
        return image

    @staticmethod
    async def delete_image(image_id: UUID) -> None:
        """Delete the stored file first, then the row"""
        image = await fetch_row("gallery", image_id, "Gallery image")
        await StorageService.delete_by_url(image["image_url"])
        await delete_row("gallery", image_id, "Gallery image")
        await query_cache.invalidate(cache.GALLERY)


class SlideshowService:
    """Service for hero slideshow images"""

    @staticmethod
    async def list_active_slides() -> List[dict]:
        async def fetch():
            rows = await database.fetch_all(
                "SELECT * FROM slideshow WHERE active = TRUE ORDER BY order_index ASC"
            )
            return [dict(r) for r in rows]

        return await query_cache.get_or_fetch(cache.SLIDESHOW, fetch, key="active")

    @staticmethod
    async def list_all_slides() -> List[dict]:
        rows = await database.fetch_all("SELECT * FROM slideshow ORDER BY order_index ASC")
        return [dict(r) for r in rows]

    @staticmethod
    async def upload_slide(content: bytes, content_type: Optional[str], tagline: Optional[str] = None) -> dict:
        image_url = await store_image(content, content_type, "slideshow")
        try:
            slide = await database.fetch_one(
                """
                INSERT INTO slideshow (id, image_url, tagline, order_index, active)
                VALUES (
                    :id, :image_url, :tagline,
                    (SELECT COALESCE(MAX(order_index), -1) + 1 FROM slideshow),
                    TRUE
                )
                RETURNING *
                """,
                {"id": str(uuid.uuid4()), "image_url": image_url, "tagline": tagline or None}
            )
        except Exception as e:
            await _discard_upload(image_url)
            raise _record_failed(e)

        await query_cache.invalidate(cache.SLIDESHOW)
        return dict(slide)

    @staticmethod
    async def update_slide(slide_id: UUID, data: UpdateSlideRequest) -> dict:
        slide = await update_row(
            "slideshow", slide_id, data.model_dump(exclude_unset=True), "Slide",
            touch_updated_at=False
        )
        await query_cache.invalidate(cache.SLIDESHOW)
        return slide

    @staticmethod
    async def delete_slide(slide_id: UUID) -> None:
        slide = await fetch_row("slideshow", slide_id, "Slide")
        await StorageService.delete_by_url(slide["image_url"])
        await delete_row("slideshow", slide_id, "Slide")
        await query_cache.invalidate(cache.SLIDESHOW)


# Singletons
gallery_service = GalleryService()
slideshow_service = SlideshowService()
