"""Demo content for running without a database.

The in-memory store starts with a complete storefront so the site and the
admin UI are usable locally: settings plus sample categories, services and
brands. Nothing here touches a schema.
"""

import logging

from storesite.services.record_store import MemoryRecordStore
from storesite.services.tenancy import default_store_settings

logger = logging.getLogger(__name__)

_WEEKDAY_HOURS = "8:00 AM - 6:00 PM"

DEMO_SETTINGS: dict = {
    "store_name": "Brown Feed Store",
    "tagline": "Your Agricultural Supply Partner Since 1967",
    "address": "123 Main Street, Lampasas, TX 76550",
    "phone": "(512) 556-3467",
    "email": "info@brownfeedstore.com",
    "monday_hours": _WEEKDAY_HOURS,
    "tuesday_hours": _WEEKDAY_HOURS,
    "wednesday_hours": _WEEKDAY_HOURS,
    "thursday_hours": _WEEKDAY_HOURS,
    "friday_hours": _WEEKDAY_HOURS,
    "saturday_hours": "8:00 AM - 5:00 PM",
    "sunday_hours": "Closed",
    "about_title": "About Brown Feed Store",
    "about_description": (
        "Family-owned and operated since 1967, Brown Feed Store has been the trusted partner "
        "for farmers and ranchers throughout Central Texas."
    ),
    "about_story": (
        "We provide high-quality feed, farm supplies, and expert advice to help your "
        "operation thrive."
    ),
    "founded_year": "1967",
    "primary_color": "#8B4513",
    "secondary_color": "#D2691E",
    "accent_color": "#228B22",
    "font_family": "Georgia",
    "facebook_url": "https://facebook.com/brownfeedstore",
    "instagram_url": "https://instagram.com/brownfeedstore",
    "x_url": "https://x.com/brownfeedstore",
    "seo_title": "Brown Feed Store - Quality Feed & Farm Supplies in Lampasas, TX",
    "seo_description": (
        "Brown Feed Store provides premium feed, farm supplies, and expert service to "
        "Central Texas farmers and ranchers. Family-owned since 1967."
    ),
    "seo_keywords": "feed store, farm supplies, livestock feed, Lampasas Texas, agricultural supplies",
}

DEMO_CATEGORIES: list[dict] = [
    {
        "name": "Livestock Feed",
        "description": "Premium feed for cattle, horses, goats, and other livestock",
        "image_url": "/images/livestock-feed.jpg",
        "featured": True,
        "sort_order": 1,
    },
    {
        "name": "Pet Food & Supplies",
        "description": "Quality nutrition and supplies for dogs, cats, and small animals",
        "image_url": "/images/pet-food.jpg",
        "featured": True,
        "sort_order": 2,
    },
    {
        "name": "Farm Equipment",
        "description": "Tools and equipment for efficient farm operations",
        "image_url": "/images/farm-equipment.jpg",
        "featured": False,
        "sort_order": 3,
    },
    {
        "name": "Seeds & Plants",
        "description": "High-quality seeds and plants for crops and gardens",
        "image_url": "/images/seeds.jpg",
        "featured": True,
        "sort_order": 4,
    },
]

DEMO_SERVICES: list[dict] = [
    {
        "name": "Custom Feed Mixing",
        "description": (
            "We'll create custom feed blends tailored to your livestock's specific "
            "nutritional needs"
        ),
        "icon": "mix",
        "featured": True,
        "sort_order": 1,
    },
    {
        "name": "Delivery Service",
        "description": "Free delivery on orders over $500 within 25 miles of our store",
        "icon": "truck",
        "featured": True,
        "sort_order": 2,
    },
    {
        "name": "Agricultural Consulting",
        "description": (
            "Expert advice on feed programs, livestock management, and farm optimization"
        ),
        "icon": "consulting",
        "featured": True,
        "sort_order": 3,
    },
]

DEMO_BRANDS: list[dict] = [
    {
        "name": "Purina",
        "description": "Trusted nutrition for livestock and pets",
        "logo_url": "/images/purina-logo.jpg",
        "website_url": "https://purina.com",
        "featured": True,
        "sort_order": 1,
    },
    {
        "name": "Blue Buffalo",
        "description": "Natural pet food made with real meat and wholesome ingredients",
        "logo_url": "/images/blue-buffalo-logo.jpg",
        "website_url": "https://bluebuffalo.com",
        "featured": True,
        "sort_order": 2,
    },
    {
        "name": "Tractor Supply Co.",
        "description": "Farm and ranch supplies for every need",
        "logo_url": "/images/tsc-logo.jpg",
        "website_url": "https://tractorsupply.com",
        "featured": False,
        "sort_order": 3,
    },
]


async def build_demo_store(
    tenant_name: str | None = None,
    domain: str | None = None,
) -> MemoryRecordStore:
    """A memory store filled with demo content.

    With a tenant name the settings are that tenant's first-boot defaults;
    without one they are the Brown Feed Store demo.
    """
    store = MemoryRecordStore()
    if tenant_name:
        await store.seed_settings(default_store_settings(tenant_name, domain))
    else:
        await store.seed_settings(dict(DEMO_SETTINGS))
    for values in DEMO_CATEGORIES:
        await store.categories.create(dict(values))
    for values in DEMO_SERVICES:
        await store.services.create(dict(values))
    for values in DEMO_BRANDS:
        await store.brands.create(dict(values))
    logger.info(
        "Loaded demo content: %s categories, %s services, %s brands",
        len(DEMO_CATEGORIES),
        len(DEMO_SERVICES),
        len(DEMO_BRANDS),
    )
    return store
