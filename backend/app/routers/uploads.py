"""
app/routers/uploads.py
Admin image uploads through presigned Firebase Storage URLs.
"""
from fastapi import APIRouter, Depends

from app.core.security import require_admin
from app.dependencies import get_upload_service
from app.schemas.common import Envelope
from app.schemas.upload import UploadOut, UploadRequest
from app.services.uploads import UploadService

admin_router = APIRouter(prefix="/uploads", tags=["Admin: Uploads"], dependencies=[Depends(require_admin)])


@admin_router.post("/presign", response_model=Envelope[UploadOut])
def presign_upload(payload: UploadRequest, service: UploadService = Depends(get_upload_service)):
    """
    Returns a signed PUT URL. Upload the file with the same Content-Type,
    then save `publicUrl` in the product's `images`.
    """
    return Envelope(result=service.create_upload_url(payload.filename, payload.content_type, payload.folder))
