"""Store service - storefront items and checkout."""

from app.cache import keys
from app.errors import ValidationError, require_text, validate_non_negative, validate_url
from app.services.base import BaseService
from site_client.schemas import ExternalBlob
from site_client.store import (
    ProductType,
    ShoppingItem,
    StoreItem,
    StripeConfiguration,
    StripeSessionStatus,
)


class StoreService(BaseService):
    """Storefront queries and mutations."""

    async def all_items(self) -> list[StoreItem]:
        return await self._query(keys.STORE_ITEMS, lambda c: c.store_items(), [])

    async def item(self, item_id: str) -> StoreItem | None:
        if not item_id:
            return None
        return await self._query(
            keys.with_params(keys.STORE_ITEM, item_id),
            lambda c: c.store_item(item_id),
            None,
        )

    async def add_item(
        self,
        title: str,
        description: str,
        price: int,
        cover_image: ExternalBlob,
        product_type: ProductType,
        preview_images: list[ExternalBlob] | None = None,
    ) -> str:
        """Add an item (price in cents), returns its id."""
        require_text(title, "title")
        validate_non_negative(price, "price")
        previews = preview_images or []
        return await self._mutate(
            "add_store_item",
            lambda c: c.add_store_item(title, description, price, cover_image, product_type, previews),
        )

    async def update_item(self, item: StoreItem) -> None:
        require_text(item.title, "title")
        validate_non_negative(item.price, "price")
        await self._mutate("update_store_item", lambda c: c.update_store_item(item))

    # ========== Checkout ==========

    async def create_checkout_session(self, items: list[ShoppingItem], success_url: str, cancel_url: str) -> str:
        """Create a payment session for the basket."""
        if not items:
            raise ValidationError("Checkout basket is empty")
        for line in items:
            validate_non_negative(line.price_in_cents, "price")
            if line.quantity < 1:
                raise ValidationError(f"Invalid quantity for {line.product_name}: {line.quantity}")
        validate_url(success_url, "success URL")
        validate_url(cancel_url, "cancel URL")
        return await self._mutate(
            "create_checkout_session",
            lambda c: c.create_checkout_session(items, success_url, cancel_url),
        )

    async def session_status(self, session_id: str) -> StripeSessionStatus | None:
        if not session_id:
            return None
        return await self._query(
            keys.with_params(keys.STRIPE_SESSION, session_id),
            lambda c: c.stripe_session_status(session_id),
            None,
        )

    async def is_stripe_configured(self) -> bool | None:
        return await self._query(keys.STRIPE_CONFIGURED, lambda c: c.is_stripe_configured(), None)

    async def set_stripe_configuration(self, config: StripeConfiguration) -> None:
        require_text(config.secret_key, "secret key")
        await self._mutate("set_stripe_configuration", lambda c: c.set_stripe_configuration(config))
