from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storesite.db.base import CatalogItemBase


class ProductCategory(CatalogItemBase):
    __tablename__ = "product_categories"

    image_url: Mapped[str] = mapped_column(Text, nullable=False)


class SpecialService(CatalogItemBase):
    __tablename__ = "special_services"

    icon: Mapped[str] = mapped_column(String(100), nullable=False)


class FeaturedBrand(CatalogItemBase):
    __tablename__ = "featured_brands"

    logo_url: Mapped[str] = mapped_column(Text, nullable=False)
    website_url: Mapped[str] = mapped_column(Text, nullable=False)
