"""
Gallery routes for gallery image management and public display.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from antique_store.database import get_db
from antique_store.schemas import GalleryImageCreate, GalleryImageResponse, IdInput
from antique_store.services import gallery_image_service

router = APIRouter()


@router.post("/createGalleryImage", response_model=GalleryImageResponse, operation_id="createGalleryImage")
async def create_gallery_image(payload: GalleryImageCreate, db: AsyncSession = Depends(get_db)):
    return await gallery_image_service.create_gallery_image(db, payload)


@router.get("/getGalleryImages", response_model=List[GalleryImageResponse], operation_id="getGalleryImages")
async def get_gallery_images(db: AsyncSession = Depends(get_db)):
    """
    Get all gallery images.
    Ordered by display_order ascending; equal display_order keeps creation order.
    """
    return await gallery_image_service.get_gallery_images(db)


@router.get(
    "/getFeaturedGalleryImages",
    response_model=List[GalleryImageResponse],
    operation_id="getFeaturedGalleryImages",
)
async def get_featured_gallery_images(db: AsyncSession = Depends(get_db)):
    return await gallery_image_service.get_featured_gallery_images(db)


@router.post("/deleteGalleryImage", response_model=bool, operation_id="deleteGalleryImage")
async def delete_gallery_image(payload: IdInput, db: AsyncSession = Depends(get_db)):
    return await gallery_image_service.delete_gallery_image(db, payload.id)
