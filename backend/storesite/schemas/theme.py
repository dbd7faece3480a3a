"""Theme generation / application schemas."""

from typing import Literal

from pydantic import BaseModel, Field

ThemeStyle = Literal[
    "modern",
    "rustic",
    "professional",
    "elegant",
    "bold",
    "minimal",
    "traditional",
    "friendly",
]


class ThemeOption(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    description: str
    # HSL strings: "H S% L%"
    primary_color: str
    secondary_color: str
    accent_color: str
    font_family: str = Field(..., min_length=1)
    style: ThemeStyle
    mood: str
    reasoning: str


class ThemeGenerationResult(BaseModel):
    business_analysis: str
    themes: list[ThemeOption] = Field(..., min_length=3, max_length=3)


class ThemeGenerateRequest(BaseModel):
    business_description: str | None = None


class ThemeApplyRequest(BaseModel):
    theme_id: str = Field(..., min_length=1)
    themes: list[ThemeOption] = Field(..., min_length=1)
    hero_image_url: str | None = None
