from storesite.models.catalog import FeaturedBrand, ProductCategory, SpecialService
from storesite.models.store_settings import StoreSettings

__all__ = [
    "FeaturedBrand",
    "ProductCategory",
    "SpecialService",
    "StoreSettings",
]
