"""Store settings request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

REQUIRED_FIELDS: tuple[str, ...] = (
    "store_name",
    "tagline",
    "address",
    "phone",
    "monday_hours",
    "tuesday_hours",
    "wednesday_hours",
    "thursday_hours",
    "friday_hours",
    "saturday_hours",
    "sunday_hours",
    "about_title",
    "about_description",
    "about_story",
    "founded_year",
    "primary_color",
    "secondary_color",
    "accent_color",
    "font_family",
    "seo_title",
    "seo_description",
    "seo_keywords",
)

THEME_FIELDS: tuple[str, ...] = ("primary_color", "secondary_color", "accent_color", "font_family")


class StoreSettingsInput(BaseModel):
    """PUT body — the full settings shape."""

    model_config = {"extra": "ignore"}

    store_name: str = Field(..., min_length=1, max_length=255)
    tagline: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1, max_length=50)
    email: str | None = None

    monday_hours: str = Field(..., min_length=1, max_length=100)
    tuesday_hours: str = Field(..., min_length=1, max_length=100)
    wednesday_hours: str = Field(..., min_length=1, max_length=100)
    thursday_hours: str = Field(..., min_length=1, max_length=100)
    friday_hours: str = Field(..., min_length=1, max_length=100)
    saturday_hours: str = Field(..., min_length=1, max_length=100)
    sunday_hours: str = Field(..., min_length=1, max_length=100)

    about_title: str = Field(..., min_length=1, max_length=255)
    about_description: str = Field(..., min_length=1)
    about_story: str = Field(..., min_length=1)
    founded_year: str = Field(..., min_length=1, max_length=10)

    logo_url: str | None = None
    favicon_url: str | None = None
    hero_image_url: str | None = None
    about_image_url: str | None = None

    primary_color: str = Field(..., min_length=1, max_length=20)
    secondary_color: str = Field(..., min_length=1, max_length=20)
    accent_color: str = Field(..., min_length=1, max_length=20)
    font_family: str = Field(..., min_length=1, max_length=100)

    facebook_url: str | None = None
    instagram_url: str | None = None
    x_url: str | None = None
    google_url: str | None = None
    yelp_url: str | None = None

    seo_title: str = Field(..., min_length=1, max_length=255)
    seo_description: str = Field(..., min_length=1)
    seo_keywords: str = Field(..., min_length=1)


class StoreSettingsPatch(BaseModel):
    """PATCH body — all fields optional (patch semantics).

    Required fields may be omitted but, when sent, must be non-empty.
    """

    model_config = {"extra": "ignore"}

    store_name: str | None = Field(None, min_length=1, max_length=255)
    tagline: str | None = Field(None, min_length=1)
    address: str | None = Field(None, min_length=1)
    phone: str | None = Field(None, min_length=1, max_length=50)
    email: str | None = None

    monday_hours: str | None = Field(None, min_length=1, max_length=100)
    tuesday_hours: str | None = Field(None, min_length=1, max_length=100)
    wednesday_hours: str | None = Field(None, min_length=1, max_length=100)
    thursday_hours: str | None = Field(None, min_length=1, max_length=100)
    friday_hours: str | None = Field(None, min_length=1, max_length=100)
    saturday_hours: str | None = Field(None, min_length=1, max_length=100)
    sunday_hours: str | None = Field(None, min_length=1, max_length=100)

    about_title: str | None = Field(None, min_length=1, max_length=255)
    about_description: str | None = Field(None, min_length=1)
    about_story: str | None = Field(None, min_length=1)
    founded_year: str | None = Field(None, min_length=1, max_length=10)

    logo_url: str | None = None
    favicon_url: str | None = None
    hero_image_url: str | None = None
    about_image_url: str | None = None

    primary_color: str | None = Field(None, min_length=1, max_length=20)
    secondary_color: str | None = Field(None, min_length=1, max_length=20)
    accent_color: str | None = Field(None, min_length=1, max_length=20)
    font_family: str | None = Field(None, min_length=1, max_length=100)

    facebook_url: str | None = None
    instagram_url: str | None = None
    x_url: str | None = None
    google_url: str | None = None
    yelp_url: str | None = None

    seo_title: str | None = Field(None, min_length=1, max_length=255)
    seo_description: str | None = Field(None, min_length=1)
    seo_keywords: str | None = Field(None, min_length=1)

    @field_validator(*REQUIRED_FIELDS, mode="before")
    @classmethod
    def reject_null_required(cls, v: object) -> object:
        if v is None:
            raise ValueError("Field may not be null")
        return v


class StoreSettingsResponse(StoreSettingsInput):
    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


# Served by GET when the tenant has not been provisioned yet.
PLACEHOLDER_SETTINGS: dict = {
    "id": 1,
    "store_name": "Loading...",
    "tagline": "Website initializing...",
    "address": "",
    "phone": "",
    "primary_color": "#2563eb",
    "secondary_color": "#64748b",
    "accent_color": "#f59e0b",
    "font_family": "Inter",
}
