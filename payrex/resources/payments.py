"""Payments API."""
from dataclasses import dataclass

from payrex.models.payments import Payment, UpdatePayment
from payrex.resources.base import Resource
from payrex.types.ids import PaymentId


@dataclass
class Payments(Resource):
    base_path: str = "/payments"

    async def retrieve(self, id: PaymentId) -> Payment:
        """Retrieve a payment. Endpoint: ``GET /payments/:id``."""
        return await self.http.get(self._path(id), Payment)

    async def update(self, id: PaymentId, params: UpdatePayment) -> Payment:
        """Update a payment's description or metadata. Endpoint: ``PUT /payments/:id``."""
        return await self.http.put(self._path(id), params, Payment)
