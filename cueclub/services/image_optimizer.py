"""
Image Optimization Service
Downscale uploaded photos and strip their metadata before storage
"""

import logging
from io import BytesIO
from PIL import Image, UnidentifiedImageError
from typing import Tuple

logger = logging.getLogger(__name__)


class ImageOptimizer:
    """Resize oversized gallery/slideshow photos and drop EXIF"""

    MAX_DIMENSION = 2048  # Max width or height
    JPEG_QUALITY = 88

    @staticmethod
    def is_image(image_bytes: bytes) -> bool:
        try:
            with Image.open(BytesIO(image_bytes)) as img:
                img.verify()
            return True
        except (UnidentifiedImageError, OSError, SyntaxError):
            return False

    @staticmethod
    def optimize(image_bytes: bytes, content_type: str = "image/jpeg") -> Tuple[bytes, str, str]:
        """
        Optimize an uploaded photo

        Photos without transparency are re-encoded as JPEG, anything with an
        alpha channel stays PNG.

        Args:
            image_bytes: Original image bytes
            content_type: Original content type

        Returns:
            Tuple of (optimized_bytes, content_type, file_extension)
        """
        try:
            img = Image.open(BytesIO(image_bytes))
            has_transparency = img.mode in ('RGBA', 'LA') or (img.mode == 'P' and 'transparency' in img.info)

            # thumbnail() keeps the aspect ratio and never upscales
            img.thumbnail((ImageOptimizer.MAX_DIMENSION, ImageOptimizer.MAX_DIMENSION), Image.Resampling.LANCZOS)

            output = BytesIO()
            if has_transparency:
                img.save(output, format='PNG', optimize=True)
                return output.getvalue(), "image/png", ".png"

            if img.mode != 'RGB':
                img = img.convert('RGB')
            img.save(output, format='JPEG', quality=ImageOptimizer.JPEG_QUALITY, optimize=True)
            return output.getvalue(), "image/jpeg", ".jpg"

        except (UnidentifiedImageError, OSError) as e:
            # Keep the original bytes; validation already accepted the type
            logger.warning("Image optimization skipped: %s", e)
            ext = ".png" if content_type == "image/png" else ".jpg"
            return image_bytes, content_type, ext

    @staticmethod
    def get_size_reduction(original_size: int, optimized_size: int) -> str:
        """Get human-readable size reduction"""
        if original_size == 0:
            return "0%"
        reduction = ((original_size - optimized_size) / original_size) * 100
        if reduction > 0:
            return f"-{reduction:.1f}%"
        elif reduction < 0:
            return f"+{abs(reduction):.1f}%"
        return "0%"


# Singleton
image_optimizer = ImageOptimizer()
