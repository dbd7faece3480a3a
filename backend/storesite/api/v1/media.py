"""Presigned image upload endpoint."""

from fastapi import APIRouter, Depends, HTTPException

from storesite.core.dependencies import get_upload_prefix
from storesite.schemas.media import UploadUrlRequest, UploadUrlResponse
from storesite.services.storage import (
    ALLOWED_CONTENT_TYPES,
    PRESIGN_UPLOAD_EXPIRES,
    build_upload_key,
    presign_put,
    public_url_for,
)

router = APIRouter()


@router.post("/upload-url", response_model=UploadUrlResponse, status_code=201)
async def create_upload_url(
    body: UploadUrlRequest,
    prefix: str = Depends(get_upload_prefix),
) -> UploadUrlResponse:
    """Generate a presigned PUT URL for an image (logo, hero, about photo, brand logo).

    The client PUTs the file directly to ``upload_url`` and then stores
    ``public_url`` in the relevant settings or catalog field.
    """
    if body.content_type not in ALLOWED_CONTENT_TYPES:
        allowed = ", ".join(sorted(ALLOWED_CONTENT_TYPES))
        raise HTTPException(
            status_code=400,
            detail=f"content_type must be one of: {allowed}",
        )

    key = build_upload_key(prefix, body.file_name)
    return UploadUrlResponse(
        upload_url=presign_put(key, body.content_type),
        key=key,
        public_url=public_url_for(key),
        expires_in=PRESIGN_UPLOAD_EXPIRES,
    )
