"""
Inkpost Backend — Media Encoding Service
==========================================

What:  Validates uploaded blog media and re-encodes it as a self-describing
       inline string: `data:<mime>;base64,<payload>`.
Why:   Blog images and videos are stored inside the blog row, not as files,
       so they travel with the post and need no file server.
How:   Type check on the declared content type, size check against
       MAX_MEDIA_SIZE, then base64 encoding.

Validation order (cheapest first):
    1. Empty upload      → treated as "no file" (browsers send an empty part
                           for an untouched file input)
    2. Declared size     → reject before reading the body when UploadFile.size
                           is already over the limit
    3. Content type      → image field accepts image/*, video field video/*
    4. Actual size       → bound the bytes actually read

Why bound the size at all:
    A data URL is ~4/3 the size of its payload and is returned with every
    read of the owning post, including the public listing.
"""

import base64
import logging
from typing import Optional

from fastapi import UploadFile

from app.config import settings
from app.exceptions import ValidationError

logger = logging.getLogger(__name__)

# field name → required MIME major type
MEDIA_KINDS = {
    "image": "image/",
    "video": "video/",
}


class MediaService:
    """Turns multipart uploads into bounded data URLs."""

    def __init__(self, max_size: Optional[int] = None):
        self.max_size = max_size or settings.max_media_size

    def validate_content_type(self, field: str, content_type: Optional[str]) -> str:
        """
        Check the declared MIME type against the field's media kind.

        Returns:
            The normalized (lower-cased, parameter-free) MIME type.
        """
        prefix = MEDIA_KINDS[field]
        mime = (content_type or "").split(";")[0].strip().lower()
        if not mime.startswith(prefix) or mime == prefix:
            raise ValidationError(
                message=f"Field '{field}' must be a {prefix.rstrip('/')} upload, got '{mime or 'unknown'}'",
                field=field,
                context={"content_type": mime},
            )
        return mime

    def validate_size(self, field: str, size: Optional[int]) -> None:
        if size is not None and size > self.max_size:
            max_mb = self.max_size / (1024 * 1024)
            raise ValidationError(
                message=f"Uploaded {field} is too large. Maximum size is {max_mb:.1f}MB.",
                field=field,
                context={"max_size": self.max_size, "size": size},
            )

    @staticmethod
    def to_data_url(mime: str, content: bytes) -> str:
        return f"data:{mime};base64,{base64.b64encode(content).decode('ascii')}"

    async def encode_upload(self, field: str, upload: Optional[UploadFile]) -> Optional[str]:
        """
        Validate and encode one multipart file field.

        Returns:
            The data URL, or None when no file (or an empty one) was sent.

        Raises:
            ValidationError: wrong media type or over MAX_MEDIA_SIZE.
        """
        if upload is None or (not upload.filename and not upload.size):
            return None

        try:
            self.validate_size(field, upload.size)
            # Read at most one byte past the limit
            content = await upload.read(self.max_size + 1)
            if not content:
                return None
            mime = self.validate_content_type(field, upload.content_type)
            self.validate_size(field, len(content))
        finally:
            await upload.close()

        logger.debug("Encoded %s upload: %s, %d bytes", field, mime, len(content))
        return self.to_data_url(mime, content)


media_service = MediaService()
