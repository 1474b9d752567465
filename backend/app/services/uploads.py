"""
app/services/uploads.py - Direct-to-bucket image uploads.

The backend never receives the file. It hands out a short-lived V4 signed
`PUT` URL for `<folder>/<uuid>-<filename>` and the client uploads straight to
Firebase Storage, then stores `public_url` in the product's `images`.
"""
import logging
import re
from datetime import timedelta
from uuid import uuid4

from app.core.exceptions import InvalidInputError
from app.schemas.upload import UploadOut

logger = logging.getLogger(__name__)

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]+")


def sanitize_filename(filename: str) -> str:
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    name = _UNSAFE.sub("-", name).strip("-.")
    return name[:100] or "file"


class UploadService:

    def __init__(self, bucket, expires_seconds: int = 900):
        self._bucket = bucket
        self._expires = expires_seconds

    def create_upload_url(self, filename: str, content_type: str, folder: str = "products") -> UploadOut:
        if not (content_type or "").lower().startswith("image/"):
            raise InvalidInputError(
                "Only image uploads are allowed",
                details={"content_type": content_type},
            )

        key = f"{folder}/{uuid4()}-{sanitize_filename(filename)}"
        blob = self._bucket.blob(key)
        upload_url = blob.generate_signed_url(
            version="v4",
            expiration=timedelta(seconds=self._expires),
            method="PUT",
            content_type=content_type,
        )
        logger.info("upload url issued key=%s content_type=%s", key, content_type)
        return UploadOut(
            upload_url=upload_url,
            object_key=key,
            public_url=blob.public_url,
            expires_in=self._expires,
        )
