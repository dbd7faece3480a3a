"""Validate-and-merge writes to the store settings singleton."""

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from storesite.core.exceptions import ValidationFailed
from storesite.schemas.store_settings import (
    StoreSettingsInput,
    StoreSettingsPatch,
    StoreSettingsResponse,
)
from storesite.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def validate_settings(payload: Mapping, *, partial: bool = False) -> dict:
    """Return the validated fields of ``payload``.

    Full mode requires every required field; partial mode only checks the
    fields that are present. Either way all offending fields are reported
    together in one ValidationFailed.
    """
    schema = StoreSettingsPatch if partial else StoreSettingsInput
    try:
        validated = schema.model_validate(dict(payload))
    except ValidationError as exc:
        raise ValidationFailed.from_pydantic(exc) from exc
    return validated.model_dump(exclude_unset=True)


async def get_settings(store: RecordStore) -> StoreSettingsResponse | None:
    return await store.get_settings()


async def apply_settings(
    store: RecordStore,
    payload: Mapping,
    *,
    partial: bool = False,
) -> StoreSettingsResponse:
    """Merge ``payload`` onto the settings singleton and return the full record.

    Fields absent from the payload keep their current values. There is no
    version check: concurrent writers are last-write-wins per field.
    """
    if partial and await store.get_settings() is None:
        # Nothing to merge onto; the payload has to stand on its own.
        partial = False
    values = validate_settings(payload, partial=partial)
    result = await store.save_settings(values)
    logger.info("Store settings updated (%s fields)", len(values))
    return result
