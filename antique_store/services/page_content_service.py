"""
Repository handlers for CMS page content.
A duplicate page_slug surfaces as ConflictError instead of a raw IntegrityError.
"""
from typing import List, Optional
import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from antique_store.errors import ConflictError
from antique_store.models import PageContent
from antique_store.schemas import PageContentCreate, PageContentResponse, PageContentUpdate

logger = logging.getLogger(__name__)


def _slug_conflict(error: IntegrityError, slug: str) -> Optional[ConflictError]:
    # PostgreSQL: page_content_page_slug_key, SQLite: page_content.page_slug
    if "page_slug" in str(error.orig):
        return ConflictError(f"Page slug '{slug}' is already taken", field="page_slug")
    return None


async def create_page_content(db: AsyncSession, data: PageContentCreate) -> PageContentResponse:
    """
    Insert a new page.

    Raises:
        ConflictError: If another page already uses the slug
    """
    try:
        page = PageContent(**data.model_dump())
        db.add(page)
        await db.flush()
        await db.refresh(page)
        await db.commit()

        logger.info(f"Created page content: ID {page.id}, slug '{page.page_slug}'")
        return PageContentResponse.model_validate(page)

    except IntegrityError as e:
        await db.rollback()
        conflict = _slug_conflict(e, data.page_slug)
        if conflict is None:
            logger.error(f"Page content creation failed: {str(e)}", exc_info=True)
            raise
        logger.warning(f"Page content creation rejected: {conflict.message}")
        raise conflict from e
    except Exception as e:
        await db.rollback()
        logger.error(f"Page content creation failed: {str(e)}", exc_info=True)
        raise


async def get_page_content_by_slug(db: AsyncSession, slug: str) -> Optional[PageContentResponse]:
    """Return the published page with the given slug, or None."""
    try:
        result = await db.execute(
            select(PageContent).where(
                PageContent.page_slug == slug,
                PageContent.is_published.is_(True),
            )
        )
        page = result.scalar_one_or_none()
        return PageContentResponse.model_validate(page) if page else None

    except Exception as e:
        logger.error(f"Failed to fetch page content '{slug}': {str(e)}", exc_info=True)
        raise


async def get_all_page_content(db: AsyncSession) -> List[PageContentResponse]:
    """Return every page, published or not, most recently updated first."""
    try:
        result = await db.execute(
            select(PageContent).order_by(PageContent.updated_at.desc(), PageContent.id.desc())
        )
        pages = result.scalars().all()
        logger.info(f"Retrieved {len(pages)} pages")
        return [PageContentResponse.model_validate(page) for page in pages]

    except Exception as e:
        logger.error(f"Failed to fetch page content: {str(e)}", exc_info=True)
        raise


async def get_page_content_by_id(db: AsyncSession, page_id: int) -> Optional[PageContentResponse]:
    try:
        result = await db.execute(select(PageContent).where(PageContent.id == page_id))
        page = result.scalar_one_or_none()
        return PageContentResponse.model_validate(page) if page else None

    except Exception as e:
        logger.error(f"Failed to fetch page content {page_id}: {str(e)}", exc_info=True)
        raise


async def update_page_content(db: AsyncSession, data: PageContentUpdate) -> Optional[PageContentResponse]:
    """
    Apply a partial update to a page.

    Returns:
        The updated page, or None if no page has the given id

    Raises:
        ConflictError: If the new slug is used by another page
    """
    fields = data.model_dump(exclude_unset=True, exclude={"id"})
    if not fields:
        return await get_page_content_by_id(db, data.id)

    fields["updated_at"] = func.now()

    try:
        result = await db.execute(
            update(PageContent)
            .where(PageContent.id == data.id)
            .values(**fields)
            .returning(PageContent)
            .execution_options(populate_existing=True)
        )
        page = result.scalar_one_or_none()
        await db.commit()

        if page is None:
            logger.info(f"Page content not found for update: ID {data.id}")
            return None

        logger.info(f"Updated page content: ID {data.id}")
        return PageContentResponse.model_validate(page)

    except IntegrityError as e:
        await db.rollback()
        conflict = _slug_conflict(e, data.page_slug)
        if conflict is None:
            logger.error(f"Page content update failed: {str(e)}", exc_info=True)
            raise
        logger.warning(f"Page content update rejected: {conflict.message}")
        raise conflict from e
    except Exception as e:
        await db.rollback()
        logger.error(f"Page content update failed: {str(e)}", exc_info=True)
        raise


async def delete_page_content(db: AsyncSession, page_id: int) -> bool:
    """Delete a page. Returns False when nothing was deleted."""
    try:
        result = await db.execute(delete(PageContent).where(PageContent.id == page_id))
        await db.commit()
        deleted = result.rowcount > 0
        logger.info(f"Delete page content ID {page_id}: {'deleted' if deleted else 'not found'}")
        return deleted

    except Exception as e:
        await db.rollback()
        logger.error(f"Delete page content failed: {str(e)}", exc_info=True)
        raise
