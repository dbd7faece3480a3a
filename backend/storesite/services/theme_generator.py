"""AI theme suggestions and HSL → hex theme application.

One chat completion per request. When OpenAI reports a rate limit or an
exhausted quota, a fixed demo result is returned instead so the admin UI
stays usable; every other failure is raised as ExternalServiceError.
"""

import json
import logging
import math
import re

import openai
from openai import AsyncOpenAI
from pydantic import ValidationError

from storesite.core.exceptions import (
    ExternalServiceError,
    NotFoundError,
    QuotaExceededError,
    ValidationFailed,
)
from storesite.schemas.store_settings import StoreSettingsResponse
from storesite.schemas.theme import ThemeGenerationResult, ThemeOption
from storesite.services.record_store import RecordStore
from storesite.services.store_settings import apply_settings

logger = logging.getLogger(__name__)

THEME_COUNT = 3

FONT_CHOICES = (
    "Inter (modern, clean)",
    "Merriweather (traditional, readable)",
    "Poppins (friendly, approachable)",
    "Playfair Display (elegant, serif)",
    "Montserrat (professional, versatile)",
    "Source Sans Pro (neutral, corporate)",
)

SYSTEM_PROMPT = (
    "You are an expert brand designer with deep knowledge of color psychology, "
    "typography, and industry design trends. Always respond with valid JSON."
)

USER_PROMPT_TEMPLATE = """You are an expert brand designer creating website themes for businesses.

Business Description: "{description}"

Analyze this business and create 3 distinct theme options that would appeal to their target customers. Each theme should have a different personality but all should be appropriate for the business type.

Consider:
- Industry conventions and customer expectations
- Geographic/regional factors if mentioned
- Business personality (traditional, modern, family-owned, etc.)
- Target demographic
- Competition differentiation

For colors, use HSL format (hue saturation% lightness%) and ensure good contrast and accessibility.

For fonts, choose from these options:
{fonts}

For style, use one of: modern, rustic, professional, elegant, bold, minimal, traditional, friendly.

Respond with JSON in this exact format:
{{
  "business_analysis": "Brief analysis of the business type and target audience",
  "themes": [
    {{
      "id": "theme-1",
      "name": "Theme Name",
      "description": "Brief description of this theme's personality",
      "primary_color": "210 15% 25%",
      "secondary_color": "45 25% 85%",
      "accent_color": "25 85% 55%",
      "font_family": "Inter",
      "style": "modern",
      "mood": "Professional and trustworthy",
      "reasoning": "Why this theme works for this business"
    }}
  ]
}}"""

FALLBACK_RESULT = ThemeGenerationResult(
    business_analysis=(
        "This appears to be a rural veterinary clinic with a traditional, trustworthy "
        "atmosphere that serves both farm animals and family pets. The 25-year history "
        "suggests established community relationships and reliability."
    ),
    themes=[
        ThemeOption(
            id="theme-1",
            name="Trusted Countryside",
            description="Warm, traditional colors that reflect rural heritage and trustworthiness",
            primary_color="200 15% 35%",
            secondary_color="120 25% 85%",
            accent_color="35 60% 55%",
            font_family="Merriweather",
            style="traditional",
            mood="Trustworthy and established",
            reasoning=(
                "Earth tones and traditional serif fonts convey reliability and experience, "
                "perfect for a long-established rural practice"
            ),
        ),
        ThemeOption(
            id="theme-2",
            name="Modern Care",
            description="Clean, professional design emphasizing medical expertise",
            primary_color="210 30% 25%",
            secondary_color="210 15% 90%",
            accent_color="160 50% 45%",
            font_family="Inter",
            style="professional",
            mood="Modern and capable",
            reasoning=(
                "Clean blues and modern typography reflect medical professionalism while "
                "remaining approachable for rural clients"
            ),
        ),
        ThemeOption(
            id="theme-3",
            name="Gentle Touch",
            description="Soft, caring colors that emphasize compassion for animals",
            primary_color="25 20% 30%",
            secondary_color="45 35% 88%",
            accent_color="90 40% 50%",
            font_family="Poppins",
            style="friendly",
            mood="Caring and approachable",
            reasoning=(
                "Warm browns and gentle greens create a nurturing atmosphere that appeals to "
                "pet owners while staying professional"
            ),
        ),
    ],
)

_HSL_RE = re.compile(
    r"^\s*(?P<h>-?\d+(?:\.\d+)?)\s+(?P<s>\d+(?:\.\d+)?)%\s+(?P<l>\d+(?:\.\d+)?)%\s*$"
)


def hsl_to_hex(hsl: str) -> str:
    """Convert an "H S% L%" string to "#rrggbb".

    >>> hsl_to_hex("0 0% 100%")
    '#ffffff'
    """
    match = _HSL_RE.match(hsl)
    if match is None:
        raise ValueError(f"Invalid HSL color: {hsl!r}")
    h = float(match["h"]) % 360
    s = float(match["s"]) / 100
    lightness = float(match["l"]) / 100
    if s > 1 or lightness > 1:
        raise ValueError(f"Invalid HSL color: {hsl!r}")

    a = s * min(lightness, 1 - lightness)

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        value = lightness - a * max(min(k - 3, 9 - k, 1), -1)
        # half-up rounding
        return f"{math.floor(255 * value + 0.5):02x}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"


def theme_settings_payload(theme: ThemeOption) -> dict:
    """Settings fields for a theme: hex colors plus the font, verbatim."""
    payload = {}
    errors = []
    for field in ("primary_color", "secondary_color", "accent_color"):
        try:
            payload[field] = hsl_to_hex(getattr(theme, field))
        except ValueError as exc:
            errors.append({"field": field, "message": str(exc)})
    if errors:
        raise ValidationFailed(errors, detail="Theme colors must be HSL strings like '210 15% 25%'")
    payload["font_family"] = theme.font_family
    return payload


async def apply_theme(
    store: RecordStore,
    theme: ThemeOption,
    hero_image_url: str | None = None,
) -> StoreSettingsResponse:
    if await store.get_settings() is None:
        raise NotFoundError("Store settings not found")
    payload = theme_settings_payload(theme)
    if hero_image_url:
        payload["hero_image_url"] = hero_image_url
    logger.info("Applying theme %s (%s)", theme.id, theme.name)
    return await apply_settings(store, payload, partial=True)


def _is_quota_error(exc: openai.OpenAIError) -> bool:
    if isinstance(exc, openai.RateLimitError):
        return True
    return isinstance(exc, openai.APIStatusError) and (
        exc.status_code == 429 or getattr(exc, "code", None) == "insufficient_quota"
    )


def parse_theme_response(content: str | None) -> ThemeGenerationResult:
    """Parse the model's JSON; exactly three themes, ids backfilled."""
    if not content:
        raise ValueError("No content received from OpenAI")
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object")
    themes = data.get("themes")
    if not isinstance(themes, list) or len(themes) != THEME_COUNT:
        raise ValueError(f"Expected exactly {THEME_COUNT} themes in response")
    for index, theme in enumerate(themes, start=1):
        if isinstance(theme, dict) and not theme.get("id"):
            theme["id"] = f"theme-{index}"
    return ThemeGenerationResult.model_validate(data)


class ThemeGenerator:
    """Proposes three themes for a business description via OpenAI."""

    def __init__(self, client: AsyncOpenAI | None, model: str = "gpt-4o"):
        self.client = client
        self.model = model

    async def _request(self, description: str) -> str | None:
        if self.client is None:
            raise ExternalServiceError("Failed to generate themes: OPENAI_API_KEY is not configured", service="openai")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": USER_PROMPT_TEMPLATE.format(
                            description=description,
                            fonts="\n".join(f"- {font}" for font in FONT_CHOICES),
                        ),
                    },
                ],
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as exc:
            if _is_quota_error(exc):
                raise QuotaExceededError(str(exc), service="openai") from exc
            raise ExternalServiceError(f"Failed to generate themes: {exc}", service="openai") from exc

        if not getattr(response, "choices", None):
            raise ExternalServiceError("Failed to generate themes: OpenAI returned no choices", service="openai")
        return response.choices[0].message.content

    async def suggest_themes(self, business_description: str | None) -> ThemeGenerationResult:
        if not business_description or not business_description.strip():
            raise ValidationFailed(
                [{"field": "business_description", "message": "Business description is required"}],
                detail="Business description is required",
            )

        try:
            content = await self._request(business_description)
        except QuotaExceededError as exc:
            logger.warning("OpenAI quota exceeded, serving demo themes: %s", exc.detail)
            return FALLBACK_RESULT.model_copy(deep=True)

        try:
            result = parse_theme_response(content)
        except (ValueError, ValidationError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.error("Malformed theme response from %s: %s", self.model, exc)
            raise ExternalServiceError(f"Failed to generate themes: {exc}", service="openai") from exc

        logger.info("Generated %s themes with %s", len(result.themes), self.model)
        return result
