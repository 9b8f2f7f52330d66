"""
Storage Service
Supabase Storage integration for gallery and slideshow images
"""

import logging
from typing import Optional
import httpx
from fastapi import HTTPException, status
from cueclub.config import settings

logger = logging.getLogger(__name__)


class StorageService:
    """Supabase Storage helper"""

    @staticmethod
    def _ensure_config():
        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Supabase Storage is not configured"
            )

    @staticmethod
    def _object_url(path: str) -> str:
        base = settings.SUPABASE_URL.rstrip("/")
        return f"{base}/storage/v1/object/{settings.STORAGE_BUCKET}/{path}"

    @staticmethod
    def _headers(content_type: Optional[str] = None) -> dict:
        headers = {
            "Authorization": f"Bearer {settings.SUPABASE_KEY}",
            "apikey": settings.SUPABASE_KEY,
        }
        if content_type is not None:
            headers["Content-Type"] = content_type or "application/octet-stream"
        return headers

    @staticmethod
    def public_url(path: str) -> str:
        base = (settings.SUPABASE_URL or "").rstrip("/")
        return f"{base}/storage/v1/object/public/{settings.STORAGE_BUCKET}/{path}"

    @staticmethod
    def path_from_url(file_url: str) -> Optional[str]:
        """Object path inside our bucket, or None for URLs stored elsewhere"""
        if not settings.SUPABASE_URL or not file_url:
            return None
        prefix = StorageService.public_url("")
        if file_url.startswith(prefix) and len(file_url) > len(prefix):
            return file_url[len(prefix):]
        return None

    @staticmethod
    async def upload_bytes(path: str, content: bytes, content_type: str) -> str:
        StorageService._ensure_config()

        try:
            async with httpx.AsyncClient(timeout=30) as client:
                resp = await client.post(
                    StorageService._object_url(path),
                    headers={**StorageService._headers(content_type), "x-upsert": "true"},
                    content=content
                )
        except httpx.HTTPError as e:
            logger.error("Storage upload of %s failed: %s", path, e)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Image upload failed: {e}"
            )

        if resp.status_code not in (200, 201):
            logger.error("Storage upload of %s rejected (%s): %s", path, resp.status_code, resp.text)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Image upload failed: {resp.text}"
            )

        return StorageService.public_url(path)

    @staticmethod
    async def delete_path(path: str) -> None:
        StorageService._ensure_config()

        try:
            async with httpx.AsyncClient(timeout=30) as client:
                resp = await client.delete(
                    StorageService._object_url(path),
                    headers=StorageService._headers()
                )
        except httpx.HTTPError as e:
            logger.error("Storage delete of %s failed: %s", path, e)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Image delete failed: {e}"
            )

        # 404 means the object is already gone
        if resp.status_code not in (200, 204, 404):
            logger.error("Storage delete of %s rejected (%s): %s", path, resp.status_code, resp.text)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Image delete failed: {resp.text}"
            )

    @staticmethod
    async def delete_by_url(file_url: str) -> bool:
        """
        Delete the object behind a public URL

        Returns False without touching storage when the URL points outside
        our bucket (e.g. a gallery image added by external link).
        """
        path = StorageService.path_from_url(file_url)
        if path is None:
            return False
        await StorageService.delete_path(path)
        return True
