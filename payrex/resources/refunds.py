"""Refunds API."""
from dataclasses import dataclass

from payrex.models.refunds import CreateRefund, Refund, UpdateRefund
from payrex.resources.base import Resource
from payrex.types.ids import RefundId


@dataclass
class Refunds(Resource):
    base_path: str = "/refunds"

    async def create(self, params: CreateRefund) -> Refund:
        """Refund a paid payment. Endpoint: ``POST /refunds``."""
        return await self.http.post(self.base_path, params, Refund)

    async def update(self, id: RefundId, params: UpdateRefund) -> Refund:
        """Update a refund's metadata. Endpoint: ``PUT /refunds/:id``."""
        return await self.http.put(self._path(id), params, Refund)
