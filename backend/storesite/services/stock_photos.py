"""Unsplash stock-photo search proxy."""

import logging

import httpx
from pydantic import ValidationError

from storesite.core.exceptions import ExternalServiceError, ValidationFailed
from storesite.schemas.media import StockPhoto

logger = logging.getLogger(__name__)

PER_PAGE = 20


class StockPhotoClient:
    def __init__(
        self,
        access_key: str | None,
        base_url: str = "https://api.unsplash.com",
        http_client: httpx.AsyncClient | None = None,
    ):
        self.access_key = access_key
        self.base_url = base_url.rstrip("/")
        self._http = http_client

    async def _get(self, url: str, params: dict, headers: dict) -> httpx.Response:
        if self._http is not None:
            return await self._http.get(url, params=params, headers=headers)
        async with httpx.AsyncClient(timeout=10.0) as client:
            return await client.get(url, params=params, headers=headers)

    async def search(self, query: str | None) -> list[StockPhoto]:
        if not query or not query.strip():
            raise ValidationFailed(
                [{"field": "query", "message": "Search query is required"}],
                detail="Search query is required",
            )
        if not self.access_key:
            raise ExternalServiceError("Unsplash API key not configured", service="unsplash")

        try:
            resp = await self._get(
                f"{self.base_url}/search/photos",
                params={"query": query, "per_page": PER_PAGE, "orientation": "landscape"},
                headers={"Authorization": f"Client-ID {self.access_key}"},
            )
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Unsplash search failed for %r: %s", query, exc)
            raise ExternalServiceError(f"Unsplash API request failed: {exc}", service="unsplash") from exc

        try:
            data = resp.json()
            if not isinstance(data, dict) or not isinstance(data.get("results", []), list):
                raise ValueError("expected an object with a results list")
            return [StockPhoto.model_validate(photo) for photo in data.get("results", [])]
        except (ValueError, ValidationError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.error("Unsplash returned an invalid response for %r: %s", query, exc)
            raise ExternalServiceError(
                f"Unsplash API returned an invalid response: {exc}", service="unsplash"
            ) from exc
