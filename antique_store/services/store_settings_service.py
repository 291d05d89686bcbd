"""
Repository handlers for the store settings singleton.

Writes go through one INSERT ... ON CONFLICT (id) DO UPDATE statement keyed on
the fixed row id, so concurrent first writes cannot create a second row.
"""
from typing import Optional
import logging

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from antique_store.config import settings
from antique_store.models import STORE_SETTINGS_ID, StoreSettings
from antique_store.schemas import StoreSettingsResponse, StoreSettingsUpdate

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


def _dialect_insert(db: AsyncSession):
    dialect = db.bind.dialect.name
    try:
        return _UPSERT_INSERTS[dialect]
    except KeyError:
        raise NotImplementedError(f"Store settings upsert is not supported on {dialect}")


async def get_store_settings(db: AsyncSession) -> Optional[StoreSettingsResponse]:
    """Return the settings row, or None if settings were never written."""
    try:
        result = await db.execute(
            select(StoreSettings).where(StoreSettings.id == STORE_SETTINGS_ID)
        )
        row = result.scalar_one_or_none()
        return StoreSettingsResponse.model_validate(row) if row else None

    except Exception as e:
        logger.error(f"Store settings retrieval failed: {str(e)}", exc_info=True)
        raise


async def update_store_settings(db: AsyncSession, data: StoreSettingsUpdate) -> StoreSettingsResponse:
    """
    Create or update the settings row.

    On first write, store_name and contact_email fall back to the configured
    defaults when omitted. Afterwards only the fields present in the payload
    are changed. updated_at is refreshed on every call.

    Returns:
        StoreSettingsResponse: The settings row after the write
    """
    fields = data.model_dump(exclude_unset=True)
    initial = {
        "store_name": settings.DEFAULT_STORE_NAME,
        "contact_email": settings.DEFAULT_CONTACT_EMAIL,
        **fields,
    }

    try:
        insert = _dialect_insert(db)
        stmt = insert(StoreSettings).values(id=STORE_SETTINGS_ID, updated_at=func.now(), **initial)
        stmt = stmt.on_conflict_do_update(
            index_elements=[StoreSettings.id],
            set_={**fields, "updated_at": func.now()},
        )
        result = await db.execute(
            stmt.returning(StoreSettings).execution_options(populate_existing=True)
        )
        row = result.scalar_one()
        await db.commit()

        logger.info(f"Store settings saved ({', '.join(sorted(fields)) or 'no field changes'})")
        return StoreSettingsResponse.model_validate(row)

    except Exception as e:
        await db.rollback()
        logger.error(f"Store settings update failed: {str(e)}", exc_info=True)
        raise
