"""
Pydantic schemas for request and response data validation.
Defines the record, creation and partial-update shapes for every entity.
"""
from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Optional

from antique_store.models import AvailabilityStatus, ItemCondition

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate only; the submitted string is stored as-is
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Must be a valid URL")
    return value


_CENTS = Decimal("0.01")
# NUMERIC(10, 2) holds at most 8 integer digits
MAX_PRICE = Decimal("99999999.99")


def round_price(price: float) -> Decimal:
    """Quantize a float price to the 2 fractional digits of the store column."""
    return Decimal(str(price)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def _check_price(value: float) -> float:
    # Bounds apply to the value that will actually be stored
    rounded = round_price(value)
    if rounded <= 0:
        raise ValueError("Price must be at least 0.01")
    if rounded > MAX_PRICE:
        raise ValueError(f"Price must not exceed {MAX_PRICE}")
    return float(rounded)


NonEmptyStr = Annotated[str, Field(min_length=1)]
UrlStr = Annotated[str, AfterValidator(_check_url)]
PositiveId = Annotated[int, Field(gt=0)]
Price = Annotated[float, Field(strict=True, allow_inf_nan=False), AfterValidator(_check_price)]
StrictInt = Annotated[int, Field(strict=True)]
StrictBool = Annotated[bool, Field(strict=True)]


def _reject_null(value):
    if value is None:
        raise ValueError("Field cannot be null")
    return value


class IdInput(BaseModel):
    """Argument shape for id-targeted mutations (delete, mark read)."""
    id: PositiveId


# Antique items

class AntiqueItemResponse(BaseModel):
    """Stored antique item as returned to callers. Price is always a number."""
    id: int
    name: str
    description: str
    year: Optional[int] = None
    origin: Optional[str] = None
    price: float
    availability_status: AvailabilityStatus
    category: str
    condition: ItemCondition
    dimensions: Optional[str] = None
    material: Optional[str] = None
    main_image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AntiqueItemCreate(BaseModel):
    """
    Request schema for creating an antique item.
    Used by POST /api/createAntiqueItem.
    """
    name: NonEmptyStr
    description: NonEmptyStr
    year: Optional[StrictInt] = None
    origin: Optional[str] = None
    price: Price
    availability_status: AvailabilityStatus = AvailabilityStatus.available
    category: NonEmptyStr
    condition: ItemCondition
    dimensions: Optional[str] = None
    material: Optional[str] = None
    main_image_url: Optional[UrlStr] = None


class AntiqueItemUpdate(BaseModel):
    """
    Request schema for partially updating an antique item.
    Only fields present in the payload are applied.
    """
    id: PositiveId
    name: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    year: Optional[StrictInt] = None
    origin: Optional[str] = None
    price: Optional[Price] = None
    availability_status: Optional[AvailabilityStatus] = None
    category: Optional[NonEmptyStr] = None
    condition: Optional[ItemCondition] = None
    dimensions: Optional[str] = None
    material: Optional[str] = None
    main_image_url: Optional[UrlStr] = None

    @field_validator("name", "description", "price", "availability_status", "category", "condition")
    @classmethod
    def not_null(cls, v):
        return _reject_null(v)


# Gallery images

class GalleryImageResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    image_url: str
    alt_text: Optional[str] = None
    display_order: int
    is_featured: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GalleryImageCreate(BaseModel):
    """
    Request schema for creating gallery images.
    Used by POST /api/createGalleryImage.
    """
    title: NonEmptyStr
    description: Optional[str] = None
    image_url: UrlStr
    alt_text: Optional[str] = None
    display_order: int = Field(default=0, ge=0, strict=True)
    is_featured: StrictBool = False


# Page content

class PageContentResponse(BaseModel):
    id: int
    page_slug: str
    title: str
    content: str
    meta_description: Optional[str] = None
    is_published: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PageContentCreate(BaseModel):
    page_slug: NonEmptyStr
    title: NonEmptyStr
    content: NonEmptyStr
    meta_description: Optional[str] = None
    is_published: StrictBool = True


class PageContentUpdate(BaseModel):
    id: PositiveId
    page_slug: Optional[NonEmptyStr] = None
    title: Optional[NonEmptyStr] = None
    content: Optional[NonEmptyStr] = None
    meta_description: Optional[str] = None
    is_published: Optional[StrictBool] = None

    @field_validator("page_slug", "title", "content", "is_published")
    @classmethod
    def not_null(cls, v):
        return _reject_null(v)


# Contact forms

class ContactFormResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    is_read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ContactFormCreate(BaseModel):
    name: NonEmptyStr
    email: EmailStr
    phone: Optional[str] = None
    subject: NonEmptyStr
    message: NonEmptyStr


# Store settings

class StoreSettingsResponse(BaseModel):
    id: int
    store_name: str
    store_description: Optional[str] = None
    contact_email: str
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    business_hours: Optional[str] = None
    google_maps_embed_url: Optional[str] = None
    social_facebook: Optional[str] = None
    social_instagram: Optional[str] = None
    social_twitter: Optional[str] = None
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StoreSettingsUpdate(BaseModel):
    """
    Request schema for upserting store settings.
    Every field is optional; omitted fields keep their stored value.
    """
    store_name: Optional[NonEmptyStr] = None
    store_description: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    business_hours: Optional[str] = None
    google_maps_embed_url: Optional[UrlStr] = None
    social_facebook: Optional[UrlStr] = None
    social_instagram: Optional[UrlStr] = None
    social_twitter: Optional[UrlStr] = None

    @field_validator("store_name", "contact_email")
    @classmethod
    def not_null(cls, v):
        return _reject_null(v)


class HealthcheckResponse(BaseModel):
    status: str
    timestamp: datetime
