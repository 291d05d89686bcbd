"""
Repository handlers for contact form submissions.
Submissions are append-only; the only mutation is marking one as read.
"""
from typing import List, Optional
import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from antique_store.models import ContactForm
from antique_store.schemas import ContactFormCreate, ContactFormResponse

logger = logging.getLogger(__name__)


async def create_contact_form(db: AsyncSession, data: ContactFormCreate) -> ContactFormResponse:
    try:
        form = ContactForm(**data.model_dump())
        db.add(form)
        await db.flush()
        await db.refresh(form)
        await db.commit()

        logger.info(f"Received contact form: ID {form.id}")
        return ContactFormResponse.model_validate(form)

    except Exception as e:
        await db.rollback()
        logger.error(f"Contact form creation failed: {str(e)}", exc_info=True)
        raise


async def get_contact_forms(db: AsyncSession) -> List[ContactFormResponse]:
    """Return all submissions, newest first."""
    try:
        result = await db.execute(
            select(ContactForm).order_by(ContactForm.created_at.desc(), ContactForm.id.desc())
        )
        forms = result.scalars().all()
        logger.info(f"Retrieved {len(forms)} contact forms")
        return [ContactFormResponse.model_validate(form) for form in forms]

    except Exception as e:
        logger.error(f"Failed to fetch contact forms: {str(e)}", exc_info=True)
        raise


async def get_contact_form_by_id(db: AsyncSession, form_id: int) -> Optional[ContactFormResponse]:
    try:
        result = await db.execute(select(ContactForm).where(ContactForm.id == form_id))
        form = result.scalar_one_or_none()
        return ContactFormResponse.model_validate(form) if form else None

    except Exception as e:
        logger.error(f"Failed to fetch contact form {form_id}: {str(e)}", exc_info=True)
        raise


async def mark_contact_form_read(db: AsyncSession, form_id: int) -> Optional[ContactFormResponse]:
    """
    Mark a submission as read.
    Idempotent: marking an already-read submission returns it unchanged.

    Returns:
        The submission, or None if no submission has the given id
    """
    try:
        result = await db.execute(
            update(ContactForm)
            .where(ContactForm.id == form_id)
            .values(is_read=True)
            .returning(ContactForm)
            .execution_options(populate_existing=True)
        )
        form = result.scalar_one_or_none()
        await db.commit()

        if form is None:
            logger.info(f"Contact form not found: ID {form_id}")
            return None

        logger.info(f"Marked contact form read: ID {form_id}")
        return ContactFormResponse.model_validate(form)

    except Exception as e:
        await db.rollback()
        logger.error(f"Mark contact form read failed: {str(e)}", exc_info=True)
        raise
