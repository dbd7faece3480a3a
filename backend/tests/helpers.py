"""Shared builders for test payloads and fake OpenAI responses."""

import json
from unittest.mock import MagicMock

from storesite.services.tenancy import default_store_settings

TENANT_NAME = "brown-feed-store"
TENANT_DOMAIN = "brownfeedstore.com"


def make_completion(content: str | dict | None) -> MagicMock:
    """A chat.completions.create() response carrying ``content``."""
    if isinstance(content, dict):
        content = json.dumps(content)
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


def theme_payload(theme_id: str | None = "theme-1", **overrides) -> dict:
    theme = {
        "id": theme_id,
        "name": "Prairie Classic",
        "description": "Earthy and dependable",
        "primary_color": "0 0% 100%",
        "secondary_color": "0 0% 0%",
        "accent_color": "0 100% 50%",
        "font_family": "Merriweather",
        "style": "rustic",
        "mood": "Warm and established",
        "reasoning": "Feels like a family-run farm store",
    }
    if theme_id is None:
        del theme["id"]
    theme.update(overrides)
    return theme


def full_settings_payload(**overrides) -> dict:
    payload = default_store_settings(TENANT_NAME, TENANT_DOMAIN)
    payload.update(overrides)
    return payload
