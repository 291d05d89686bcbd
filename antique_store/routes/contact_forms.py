"""
Contact form routes.
Submission is the only public write, so it is rate limited per client.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from antique_store.database import get_db
from antique_store.schemas import ContactFormCreate, ContactFormResponse, IdInput
from antique_store.services import contact_form_service
from antique_store.utils.rate_limit import limiter, RATE_LIMITS

router = APIRouter()


@router.post("/createContactForm", response_model=ContactFormResponse, operation_id="createContactForm")
@limiter.limit(RATE_LIMITS["contact_form"])
async def create_contact_form(
    request: Request,
    payload: ContactFormCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Submit a contact form.

    Raises:
        RateLimitExceeded: 429 when the client exceeds CONTACT_FORM_RATE_LIMIT
    """
    return await contact_form_service.create_contact_form(db, payload)


@router.get("/getContactForms", response_model=List[ContactFormResponse], operation_id="getContactForms")
async def get_contact_forms(db: AsyncSession = Depends(get_db)):
    return await contact_form_service.get_contact_forms(db)


@router.post(
    "/markContactFormRead",
    response_model=Optional[ContactFormResponse],
    operation_id="markContactFormRead",
)
async def mark_contact_form_read(payload: IdInput, db: AsyncSession = Depends(get_db)):
    return await contact_form_service.mark_contact_form_read(db, payload.id)
