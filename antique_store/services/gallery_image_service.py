"""
Repository handlers for gallery images.
Images are ordered by display_order, ties broken by creation order.
"""
from typing import List
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from antique_store.models import GalleryImage
from antique_store.schemas import GalleryImageCreate, GalleryImageResponse

logger = logging.getLogger(__name__)

_DISPLAY_ORDER = (
    GalleryImage.display_order.asc(),
    GalleryImage.created_at.asc(),
    GalleryImage.id.asc(),
)


async def create_gallery_image(db: AsyncSession, data: GalleryImageCreate) -> GalleryImageResponse:
    """
    Insert a new gallery image.

    Args:
        db: Database session
        data: Validated creation payload

    Returns:
        GalleryImageResponse: Created image with id and created_at
    """
    try:
        image = GalleryImage(**data.model_dump())
        db.add(image)
        await db.flush()
        await db.refresh(image)
        await db.commit()

        logger.info(f"Created gallery image: ID {image.id}, display_order={image.display_order}")
        return GalleryImageResponse.model_validate(image)

    except Exception as e:
        await db.rollback()
        logger.error(f"Gallery image creation failed: {str(e)}", exc_info=True)
        raise


async def get_gallery_images(db: AsyncSession) -> List[GalleryImageResponse]:
    try:
        result = await db.execute(select(GalleryImage).order_by(*_DISPLAY_ORDER))
        images = result.scalars().all()
        logger.info(f"Retrieved {len(images)} gallery images")
        return [GalleryImageResponse.model_validate(img) for img in images]

    except Exception as e:
        logger.error(f"Failed to fetch gallery images: {str(e)}", exc_info=True)
        raise


async def get_featured_gallery_images(db: AsyncSession) -> List[GalleryImageResponse]:
    """Return featured images only, in display order."""
    try:
        result = await db.execute(
            select(GalleryImage)
            .where(GalleryImage.is_featured.is_(True))
            .order_by(*_DISPLAY_ORDER)
        )
        images = result.scalars().all()
        logger.info(f"Retrieved {len(images)} featured gallery images")
        return [GalleryImageResponse.model_validate(img) for img in images]

    except Exception as e:
        logger.error(f"Failed to fetch featured gallery images: {str(e)}", exc_info=True)
        raise


async def delete_gallery_image(db: AsyncSession, image_id: int) -> bool:
    """Delete a gallery image. Returns False when nothing was deleted."""
    try:
        result = await db.execute(delete(GalleryImage).where(GalleryImage.id == image_id))
        await db.commit()
        deleted = result.rowcount > 0
        logger.info(f"Delete gallery image ID {image_id}: {'deleted' if deleted else 'not found'}")
        return deleted

    except Exception as e:
        await db.rollback()
        logger.error(f"Delete gallery image failed: {str(e)}", exc_info=True)
        raise
