"""Payment Intents API."""
from dataclasses import dataclass

from payrex.models.payment_intents import CapturePaymentIntent, CreatePaymentIntent, PaymentIntent
from payrex.resources.base import Resource
from payrex.types.ids import PaymentIntentId


@dataclass
class PaymentIntents(Resource):
    """Payment intents track a customer's payment lifecycle."""
    base_path: str = "/payment_intents"

    async def create(self, params: CreatePaymentIntent) -> PaymentIntent:
        return await self.http.post(self.base_path, params, PaymentIntent)

    async def retrieve(self, id: PaymentIntentId) -> PaymentIntent:
        return await self.http.get(self._path(id), PaymentIntent)

    async def cancel(self, id: PaymentIntentId) -> PaymentIntent:
        """Cancel a payment intent that is awaiting a payment method."""
        return await self.http.post(self._path(id, "cancel"), None, PaymentIntent)

    async def capture(self, id: PaymentIntentId, params: CapturePaymentIntent) -> PaymentIntent:
        """Capture an authorized amount of a manual-capture payment intent."""
        return await self.http.post(self._path(id, "capture"), params, PaymentIntent)
