"""
CMS routes for page content.
Public reads by slug only see published pages; the admin listing sees all.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from antique_store.database import get_db
from antique_store.schemas import (
    IdInput,
    PageContentCreate,
    PageContentResponse,
    PageContentUpdate,
)
from antique_store.services import page_content_service

router = APIRouter()


@router.post("/createPageContent", response_model=PageContentResponse, operation_id="createPageContent")
async def create_page_content(payload: PageContentCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a page.

    Raises:
        ConflictError: 409 if the slug is already taken
    """
    return await page_content_service.create_page_content(db, payload)


@router.get(
    "/getPageContentBySlug",
    response_model=Optional[PageContentResponse],
    operation_id="getPageContentBySlug",
)
async def get_page_content_by_slug(slug: str = Query(..., min_length=1), db: AsyncSession = Depends(get_db)):
    return await page_content_service.get_page_content_by_slug(db, slug)


@router.get("/getAllPageContent", response_model=List[PageContentResponse], operation_id="getAllPageContent")
async def get_all_page_content(db: AsyncSession = Depends(get_db)):
    return await page_content_service.get_all_page_content(db)


@router.post(
    "/updatePageContent",
    response_model=Optional[PageContentResponse],
    operation_id="updatePageContent",
)
async def update_page_content(payload: PageContentUpdate, db: AsyncSession = Depends(get_db)):
    return await page_content_service.update_page_content(db, payload)


@router.post("/deletePageContent", response_model=bool, operation_id="deletePageContent")
async def delete_page_content(payload: IdInput, db: AsyncSession = Depends(get_db)):
    return await page_content_service.delete_page_content(db, payload.id)
