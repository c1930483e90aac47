"""Storefront API schemas."""

from enum import StrEnum

from pydantic import BaseModel, Field

from site_client.schemas import ExternalBlob


class ProductKind(StrEnum):
    """Product categories."""

    CLOTHING = "clothing"
    EBOOK = "eBook"
    OTHER = "other"


class ProductType(BaseModel):
    """Product category; `other` carries a free-form label."""

    kind: ProductKind
    other: str | None = None


class StoreItem(BaseModel):
    """Storefront item. Price in cents."""

    id: str
    title: str
    description: str = ""
    price: int
    product_type: ProductType = Field(alias="productType")
    available: bool = True
    cover_image: ExternalBlob = Field(alias="coverImage")
    preview_images: list[ExternalBlob] = Field(alias="previewImages", default=[])

    class Config:
        populate_by_name = True


class ShoppingItem(BaseModel):
    """Checkout basket line."""

    product_name: str = Field(alias="productName")
    product_description: str = Field(alias="productDescription", default="")
    currency: str = "eur"
    quantity: int = 1
    price_in_cents: int = Field(alias="priceInCents")

    class Config:
        populate_by_name = True


class StripeConfiguration(BaseModel):
    """Payment provider settings."""

    secret_key: str = Field(alias="secretKey")
    allowed_countries: list[str] = Field(alias="allowedCountries", default=[])

    class Config:
        populate_by_name = True


class SessionOutcome(StrEnum):
    """Checkout session outcomes."""

    COMPLETED = "completed"
    FAILED = "failed"


class StripeSessionStatus(BaseModel):
    """Checkout session status."""

    kind: SessionOutcome
    response: str | None = None
    user_principal: str | None = Field(alias="userPrincipal", default=None)
    error: str | None = None

    class Config:
        populate_by_name = True
