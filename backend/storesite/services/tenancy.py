"""Tenant schema provisioning.

A deployment serves one tenant, named by ``CLIENT_NAME``. Its tables live
in a Postgres schema whose name is the tenant's *schema key*:
every character outside ``[A-Za-z0-9]`` becomes ``_`` and the result is
lowercased. ``SchemaKey`` values are only produced by :func:`schema_key_for`.

Provisioning is safe to repeat: structure is created with "if not exists"
semantics and the settings row is seeded only when none exists, so a restart
never overwrites settings edited through the admin UI.
"""

import logging
import re
from datetime import UTC, datetime
from typing import TYPE_CHECKING, NewType

if TYPE_CHECKING:
    from storesite.services.record_store import RecordStore

logger = logging.getLogger(__name__)

SchemaKey = NewType("SchemaKey", str)

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_SEPARATORS = re.compile(r"[-_]")
_WORD_START = re.compile(r"\b\w")


def schema_key_for(tenant_name: str) -> SchemaKey:
    """Derive the schema key for a tenant name.

    >>> schema_key_for("Bob's Feed & Seed!")
    'bob_s_feed___seed_'
    """
    key = _NON_ALNUM.sub("_", tenant_name).lower()
    if not key:
        raise ValueError("Tenant name must not be empty")
    return SchemaKey(key)


def display_name_for(tenant_name: str) -> str:
    """'brown-feed_store' -> 'Brown Feed Store'."""
    spaced = _SEPARATORS.sub(" ", tenant_name)
    return _WORD_START.sub(lambda m: m.group(0).upper(), spaced)


def default_store_settings(tenant_name: str, domain: str | None) -> dict:
    """First-boot settings for a tenant."""
    name = display_name_for(tenant_name)
    weekday_hours = "9:00 AM - 6:00 PM"
    return {
        "store_name": name,
        "tagline": "Your trusted local business",
        "address": "123 Main Street, Your City, State 12345",
        "phone": "(555) 123-4567",
        "email": f"info@{domain}" if domain else None,
        "monday_hours": weekday_hours,
        "tuesday_hours": weekday_hours,
        "wednesday_hours": weekday_hours,
        "thursday_hours": weekday_hours,
        "friday_hours": weekday_hours,
        "saturday_hours": "9:00 AM - 4:00 PM",
        "sunday_hours": "Closed",
        "about_title": f"About {name}",
        "about_description": "A trusted local business serving our community",
        "about_story": "Our story begins with a commitment to quality and service...",
        "founded_year": str(datetime.now(UTC).year),
        "primary_color": "#2563eb",
        "secondary_color": "#64748b",
        "accent_color": "#f59e0b",
        "font_family": "Inter",
        "seo_title": f"{name} - Quality Service",
        "seo_description": "Your trusted local business providing quality products and services.",
        "seo_keywords": "local business, quality service, trusted provider",
    }


async def provision_tenant(store: "RecordStore", tenant_name: str, domain: str | None) -> bool:
    """Ensure the tenant's schema and tables exist and seed default settings.

    Returns False (after logging) on any failure instead of raising, so a
    broken database never stops the process from serving.
    """
    try:
        schema_key = schema_key_for(tenant_name)
        if store.schema_key is not None and store.schema_key != schema_key:
            raise ValueError(
                f"Store is bound to schema {store.schema_key!r}, not {schema_key!r}"
            )
        logger.info("Initializing schema %s for client %s", schema_key, tenant_name)
        await store.ensure_structure()
        seeded = await store.seed_settings(default_store_settings(tenant_name, domain))
    except Exception:
        logger.exception("Failed to initialize client %s", tenant_name)
        return False

    if seeded:
        logger.info("Seeded default store settings for client %s", tenant_name)
    else:
        logger.info("Store settings already present for client %s; skipping seed", tenant_name)
    return True
