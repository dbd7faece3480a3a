"""Product category / special service / featured brand schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class CatalogItemInput(BaseModel):
    model_config = {"extra": "ignore"}

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    featured: bool = False
    sort_order: int = 0


class CatalogItemResponse(BaseModel):
    id: int
    name: str
    description: str
    featured: bool
    sort_order: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ProductCategoryInput(CatalogItemInput):
    image_url: str = Field(..., min_length=1)


class ProductCategoryResponse(CatalogItemResponse):
    image_url: str


class SpecialServiceInput(CatalogItemInput):
    icon: str = Field(..., min_length=1, max_length=100)
    sort_order: int = Field(0, ge=0)


class SpecialServiceResponse(CatalogItemResponse):
    icon: str


class FeaturedBrandInput(CatalogItemInput):
    logo_url: str = Field(..., min_length=1)
    website_url: str = Field(..., min_length=1)
    sort_order: int = Field(0, ge=0)


class FeaturedBrandResponse(CatalogItemResponse):
    logo_url: str
    website_url: str
