"""Storefront API client."""

from site_client.store.client import StoreClient
from site_client.store.schemas import (
    ProductKind,
    ProductType,
    SessionOutcome,
    ShoppingItem,
    StoreItem,
    StripeConfiguration,
    StripeSessionStatus,
)

__all__ = [
    "StoreClient",
    "ProductKind",
    "ProductType",
    "StoreItem",
    "ShoppingItem",
    "StripeConfiguration",
    "SessionOutcome",
    "StripeSessionStatus",
]
