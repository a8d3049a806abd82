from __future__ import annotations

from typing import List

from ..models import CreateWebhookSubscriptionOptions, WebhookSubscription
from ._base import BaseService, path_segment


class WebhooksService(BaseService):
    """
    Webhook subscriptions for environmental events.

    Register a URL to receive temperature excursions and other sensor events;
    subscriptions can be paused (``stop``), resumed (``start``) and deleted.
    """

    async def register(self, options: CreateWebhookSubscriptionOptions) -> WebhookSubscription:
        return await self._request(
            "webhooks.register", "subscription", "POST",
            body=options.to_request_body(), route="subscription")

    async def list(self) -> List[WebhookSubscription]:
        return await self._request("webhooks.list", "subscription", route="subscription")

    async def stop(self, subscription_id: str) -> None:
        await self._request(
            "webhooks.stop", f"subscription/{path_segment(subscription_id)}/stop", "POST",
            route="subscription/:id/stop")

    async def start(self, subscription_id: str) -> None:
        await self._request(
            "webhooks.start", f"subscription/{path_segment(subscription_id)}/start", "POST",
            route="subscription/:id/start")

    async def delete(self, subscription_id: str) -> None:
        await self._request(
            "webhooks.delete", f"subscription/{path_segment(subscription_id)}", "DELETE",
            route="subscription/:id")
