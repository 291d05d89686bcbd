"""
Repository handlers for antique items.
Converts price between the fixed-point store column and a plain float.
"""
from decimal import Decimal
from typing import List, Optional
import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from antique_store.models import AntiqueItem
from antique_store.schemas import AntiqueItemCreate, AntiqueItemResponse, AntiqueItemUpdate, round_price

logger = logging.getLogger(__name__)


def price_to_decimal(price: float) -> Decimal:
    return round_price(price)


def price_to_float(price: Decimal) -> float:
    return float(price)


def _to_response(item: AntiqueItem) -> AntiqueItemResponse:
    values = {column.name: getattr(item, column.name) for column in AntiqueItem.__table__.columns}
    values["price"] = price_to_float(item.price)
    return AntiqueItemResponse(**values)


async def create_antique_item(db: AsyncSession, data: AntiqueItemCreate) -> AntiqueItemResponse:
    """
    Insert a new antique item.

    Args:
        db: Database session
        data: Validated creation payload

    Returns:
        AntiqueItemResponse: Created item with id and timestamps
    """
    try:
        values = data.model_dump()
        values["price"] = price_to_decimal(data.price)
        item = AntiqueItem(**values)
        db.add(item)
        await db.flush()
        await db.refresh(item)
        await db.commit()

        logger.info(f"Created antique item: ID {item.id}")
        return _to_response(item)

    except Exception as e:
        await db.rollback()
        logger.error(f"Antique item creation failed: {str(e)}", exc_info=True)
        raise


async def get_antique_items(db: AsyncSession) -> List[AntiqueItemResponse]:
    """Return all antique items, newest first."""
    try:
        result = await db.execute(
            select(AntiqueItem).order_by(AntiqueItem.created_at.desc(), AntiqueItem.id.desc())
        )
        items = result.scalars().all()
        logger.info(f"Retrieved {len(items)} antique items")
        return [_to_response(item) for item in items]

    except Exception as e:
        logger.error(f"Failed to fetch antique items: {str(e)}", exc_info=True)
        raise


async def get_antique_item_by_id(db: AsyncSession, item_id: int) -> Optional[AntiqueItemResponse]:
    """Return the item with the given id, or None."""
    try:
        result = await db.execute(select(AntiqueItem).where(AntiqueItem.id == item_id))
        item = result.scalar_one_or_none()
        return _to_response(item) if item else None

    except Exception as e:
        logger.error(f"Failed to fetch antique item {item_id}: {str(e)}", exc_info=True)
        raise


async def update_antique_item(db: AsyncSession, data: AntiqueItemUpdate) -> Optional[AntiqueItemResponse]:
    """
    Apply a partial update to an antique item.

    Only fields present in the payload are written. An empty payload returns
    the current record untouched; updated_at is refreshed on every write.

    Returns:
        The updated item, or None if no item has the given id
    """
    fields = data.model_dump(exclude_unset=True, exclude={"id"})
    if not fields:
        return await get_antique_item_by_id(db, data.id)

    if "price" in fields:
        fields["price"] = price_to_decimal(fields["price"])
    fields["updated_at"] = func.now()

    try:
        result = await db.execute(
            update(AntiqueItem)
            .where(AntiqueItem.id == data.id)
            .values(**fields)
            .returning(AntiqueItem)
            .execution_options(populate_existing=True)
        )
        item = result.scalar_one_or_none()
        await db.commit()

        if item is None:
            logger.info(f"Antique item not found for update: ID {data.id}")
            return None

        logger.info(f"Updated antique item: ID {data.id}")
        return _to_response(item)

    except Exception as e:
        await db.rollback()
        logger.error(f"Antique item update failed: {str(e)}", exc_info=True)
        raise


async def delete_antique_item(db: AsyncSession, item_id: int) -> bool:
    """Delete an antique item. Returns False when nothing was deleted."""
    try:
        result = await db.execute(delete(AntiqueItem).where(AntiqueItem.id == item_id))
        await db.commit()
        deleted = result.rowcount > 0
        logger.info(f"Delete antique item ID {item_id}: {'deleted' if deleted else 'not found'}")
        return deleted

    except Exception as e:
        await db.rollback()
        logger.error(f"Delete antique item failed: {str(e)}", exc_info=True)
        raise
