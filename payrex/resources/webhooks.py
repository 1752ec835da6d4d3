"""Webhooks API."""
from dataclasses import dataclass
from typing import Optional

from payrex.models.webhooks import CreateWebhook, UpdateWebhook, Webhook, WebhookListParams
from payrex.resources.base import Resource
from payrex.types.common import Deleted
from payrex.types.ids import WebhookId
from payrex.types.pagination import PaginatedList


@dataclass
class Webhooks(Resource):
    """Webhook endpoints notified about events in the account."""
    base_path: str = "/webhooks"

    async def create(self, params: CreateWebhook) -> Webhook:
        return await self.http.post(self.base_path, params, Webhook)

    async def retrieve(self, id: WebhookId) -> Webhook:
        return await self.http.get(self._path(id), Webhook)

    async def update(self, id: WebhookId, params: UpdateWebhook) -> Webhook:
        return await self.http.put(self._path(id), params, Webhook)

    async def delete(self, id: WebhookId) -> Deleted[WebhookId]:
        return await self.http.delete(self._path(id), Deleted[WebhookId])

    async def list(self, params: Optional[WebhookListParams] = None) -> PaginatedList[Webhook]:
        return await self.http.get_with_params(
            self.base_path, params or WebhookListParams(), PaginatedList[Webhook]
        )

    async def enable(self, id: WebhookId) -> Webhook:
        return await self.http.post(self._path(id, "enable"), None, Webhook)

    async def disable(self, id: WebhookId) -> Webhook:
        return await self.http.post(self._path(id, "disable"), None, Webhook)
