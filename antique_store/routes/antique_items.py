"""
Antique item routes.
Each route is one remote call and delegates to antique_item_service.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from antique_store.database import get_db
from antique_store.schemas import (
    AntiqueItemCreate,
    AntiqueItemResponse,
    AntiqueItemUpdate,
    IdInput,
)
from antique_store.services import antique_item_service

router = APIRouter()


@router.post("/createAntiqueItem", response_model=AntiqueItemResponse, operation_id="createAntiqueItem")
async def create_antique_item(payload: AntiqueItemCreate, db: AsyncSession = Depends(get_db)):
    return await antique_item_service.create_antique_item(db, payload)


@router.get("/getAntiqueItems", response_model=List[AntiqueItemResponse], operation_id="getAntiqueItems")
async def get_antique_items(db: AsyncSession = Depends(get_db)):
    """List all antique items, newest first."""
    return await antique_item_service.get_antique_items(db)


@router.get(
    "/getAntiqueItemById",
    response_model=Optional[AntiqueItemResponse],
    operation_id="getAntiqueItemById",
)
async def get_antique_item_by_id(id: int = Query(..., gt=0), db: AsyncSession = Depends(get_db)):
    """Get one antique item; returns null when the id does not exist."""
    return await antique_item_service.get_antique_item_by_id(db, id)


@router.post(
    "/updateAntiqueItem",
    response_model=Optional[AntiqueItemResponse],
    operation_id="updateAntiqueItem",
)
async def update_antique_item(payload: AntiqueItemUpdate, db: AsyncSession = Depends(get_db)):
    """Partially update an antique item; returns null when the id does not exist."""
    return await antique_item_service.update_antique_item(db, payload)


@router.post("/deleteAntiqueItem", response_model=bool, operation_id="deleteAntiqueItem")
async def delete_antique_item(payload: IdInput, db: AsyncSession = Depends(get_db)):
    return await antique_item_service.delete_antique_item(db, payload.id)
