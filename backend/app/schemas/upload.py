"""
app/schemas/upload.py - Presigned upload request / response.
"""
from pydantic import Field

from app.schemas.common import CamelModel


class UploadRequest(CamelModel):
    filename: str = Field(..., min_length=1, max_length=200)
    content_type: str = Field(..., description="MIME type, must be image/*")
    folder: str = Field("products", pattern=r"^[a-z0-9_-]+$")


class UploadOut(CamelModel):
    upload_url: str = Field(..., description="PUT the file here with the same Content-Type")
    object_key: str
    public_url: str
    expires_in: int = Field(..., description="Seconds until upload_url expires")
