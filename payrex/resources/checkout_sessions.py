"""Checkout Sessions API."""
from dataclasses import dataclass

from payrex.models.checkout_sessions import CheckoutSession, CreateCheckoutSession
from payrex.resources.base import Resource
from payrex.types.ids import CheckoutSessionId


@dataclass
class CheckoutSessions(Resource):
    base_path: str = "/checkout_sessions"

    async def create(self, params: CreateCheckoutSession) -> CheckoutSession:
        return await self.http.post(self.base_path, params, CheckoutSession)

    async def retrieve(self, id: CheckoutSessionId) -> CheckoutSession:
        return await self.http.get(self._path(id), CheckoutSession)

    async def expire(self, id: CheckoutSessionId) -> CheckoutSession:
        """Expire an active checkout session so it can no longer be paid."""
        return await self.http.post(self._path(id, "expire"), None, CheckoutSession)
