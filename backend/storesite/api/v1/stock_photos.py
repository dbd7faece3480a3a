"""Stock photo search (Unsplash proxy)."""

from fastapi import APIRouter, Depends, Query

from storesite.core.dependencies import get_stock_photo_client
from storesite.schemas.media import StockPhotoSearchResponse
from storesite.services.stock_photos import StockPhotoClient

router = APIRouter()


@router.get("/search", response_model=StockPhotoSearchResponse)
async def search_stock_photos(
    query: str | None = Query(None),
    client: StockPhotoClient = Depends(get_stock_photo_client),
) -> StockPhotoSearchResponse:
    return StockPhotoSearchResponse(photos=await client.search(query))
