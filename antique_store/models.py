"""
SQLAlchemy models for the application.
All database models inherit from Base (declarative base).
"""
import enum

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    Integer,
    Numeric,
    Text,
)
from sqlalchemy.sql import func
from antique_store.database import Base

# Fixed primary key of the single store settings row
STORE_SETTINGS_ID = 1


class AvailabilityStatus(str, enum.Enum):
    available = "available"
    sold = "sold"
    reserved = "reserved"


class ItemCondition(str, enum.Enum):
    excellent = "excellent"
    very_good = "very_good"
    good = "good"
    fair = "fair"
    needs_restoration = "needs_restoration"


class AntiqueItem(Base):
    """
    Catalog listing for a single antique.
    Price is stored as NUMERIC(10, 2) and exposed as a float by the service layer.
    """
    __tablename__ = "antique_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    year = Column(Integer, nullable=True)
    origin = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    availability_status = Column(
        Enum(AvailabilityStatus, name="availability_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=AvailabilityStatus.available,
        server_default=AvailabilityStatus.available.value,
    )
    category = Column(Text, nullable=False)
    condition = Column(
        Enum(ItemCondition, name="condition", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    dimensions = Column(Text, nullable=True)
    material = Column(Text, nullable=True)
    main_image_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class GalleryImage(Base):
    """
    Gallery image with ordering metadata.
    Rows are never updated, only created and deleted.
    """
    __tablename__ = "gallery_images"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=False)
    alt_text = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=False, default=0, server_default="0", index=True)
    is_featured = Column(Boolean, nullable=False, default=False, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class PageContent(Base):
    """CMS page identified by a unique slug."""
    __tablename__ = "page_content"

    id = Column(Integer, primary_key=True, index=True)
    page_slug = Column(Text, nullable=False, unique=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    meta_description = Column(Text, nullable=True)
    is_published = Column(Boolean, nullable=False, default=True, server_default="1")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class ContactForm(Base):
    """Inbound contact form submission."""
    __tablename__ = "contact_forms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=True)
    subject = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class StoreSettings(Base):
    """
    Store-wide configuration.
    At most one row exists; its id is always STORE_SETTINGS_ID.
    """
    __tablename__ = "store_settings"
    __table_args__ = (
        CheckConstraint(f"id = {STORE_SETTINGS_ID}", name="ck_store_settings_singleton"),
    )

    id = Column(Integer, primary_key=True, autoincrement=False, default=STORE_SETTINGS_ID)
    store_name = Column(Text, nullable=False)
    store_description = Column(Text, nullable=True)
    contact_email = Column(Text, nullable=False)
    contact_phone = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    business_hours = Column(Text, nullable=True)
    google_maps_embed_url = Column(Text, nullable=True)
    social_facebook = Column(Text, nullable=True)
    social_instagram = Column(Text, nullable=True)
    social_twitter = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
