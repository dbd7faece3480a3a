"""Upload and stock-photo schemas."""

from pydantic import BaseModel, Field

from storesite.services.storage import MAX_UPLOAD_SIZE


class UploadUrlRequest(BaseModel):
    file_name: str = Field(..., min_length=1, max_length=255)
    content_type: str = Field(..., min_length=1)
    size_bytes: int = Field(..., gt=0, le=MAX_UPLOAD_SIZE)


class UploadUrlResponse(BaseModel):
    upload_url: str
    key: str
    public_url: str
    expires_in: int


class StockPhotoUrls(BaseModel):
    small: str
    regular: str
    full: str


class StockPhotoUser(BaseModel):
    name: str
    username: str


class StockPhoto(BaseModel):
    id: str
    urls: StockPhotoUrls
    alt_description: str | None = None
    description: str | None = None
    user: StockPhotoUser


class StockPhotoSearchResponse(BaseModel):
    photos: list[StockPhoto]
