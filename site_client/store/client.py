"""Storefront API client - items and checkout."""

from site_client.base import BaseClient
from site_client.schemas import ExternalBlob
from site_client.store.schemas import (
    ProductType,
    ShoppingItem,
    StoreItem,
    StripeConfiguration,
    StripeSessionStatus,
)


class StoreClient(BaseClient):
    """Client for storefront endpoints."""

    async def store_items(self) -> list[StoreItem]:
        """GET /store/items - all items."""
        return [StoreItem.model_validate(i) for i in await self._get("store/items")]

    async def store_item(self, item_id: str) -> StoreItem | None:
        """GET /store/items/{id} - single item or None."""
        data = await self._get(f"store/items/{item_id}")
        return StoreItem.model_validate(data) if data is not None else None

    async def add_store_item(
        self,
        title: str,
        description: str,
        price: int,
        cover_image: ExternalBlob,
        product_type: ProductType,
        preview_images: list[ExternalBlob],
    ) -> str:
        """POST /store/items - returns new item id."""
        return await self._post(
            "store/items",
            {
                "title": title,
                "description": description,
                "price": price,
                "coverImage": cover_image.model_dump(),
                "productType": product_type.model_dump(mode="json"),
                "previewImages": [b.model_dump() for b in preview_images],
            },
        )

    async def update_store_item(self, item: StoreItem) -> None:
        """PUT /store/items/{id} - full item."""
        await self._put(f"store/items/{item.id}", item.model_dump(by_alias=True, mode="json"))

    async def create_checkout_session(
        self,
        items: list[ShoppingItem],
        success_url: str,
        cancel_url: str,
    ) -> str:
        """POST /store/checkout - returns provider session payload."""
        return await self._post(
            "store/checkout",
            {
                "items": [i.model_dump(by_alias=True) for i in items],
                "successUrl": success_url,
                "cancelUrl": cancel_url,
            },
        )

    async def stripe_session_status(self, session_id: str) -> StripeSessionStatus:
        """GET /store/checkout/{session_id}."""
        return StripeSessionStatus.model_validate(await self._get(f"store/checkout/{session_id}"))

    async def is_stripe_configured(self) -> bool:
        """GET /store/stripe/configured."""
        return bool(await self._get("store/stripe/configured"))

    async def set_stripe_configuration(self, config: StripeConfiguration) -> None:
        """PUT /store/stripe."""
        await self._put("store/stripe", config.model_dump(by_alias=True))
