# Code generated by scripts/generate_models.py from payments.yaml. DO NOT EDIT.
"""Payment models."""
from enum import Enum
from typing import Annotated, Any, Dict, Optional

from pydantic import Field

from payrex.models.customers import OptionalCustomer
from payrex.types.base import OmitIfNone, PayrexModel
from payrex.types.common import Currency, Metadata, PaymentMethod, Timestamp
from payrex.types.ids import PaymentId, PaymentIntentId


class PaymentStatus(str, Enum):
    """The latest status of a Payment."""

    PAID = "paid"
    """The payment was paid."""
    FAILED = "failed"
    """The payment failed."""


class PaymentMethodDetails(PayrexModel):
    """The payment method used for a Payment."""

    method_type: PaymentMethod = Field(alias="type")
    """The type of the payment method."""

    card: Annotated[Optional[Dict[str, Any]], OmitIfNone()] = None
    """Card details when the payment method is `card`."""


class Payment(PayrexModel):
    """A Payment resource represents an individual attempt to move money to your PayRex merchant account balance."""

    id: PaymentId
    """Unique identifier for the resource. The prefix is `pay_`."""

    amount_refunded: int
    """The amount refunded from the Payment, in cents."""

    fee: int
    """The fee deducted by PayRex from the Payment, in cents."""

    net_amount: Annotated[Optional[int], OmitIfNone()] = None
    """The amount that will be settled to your merchant account, in cents."""

    payment_intent_id: Annotated[Optional[PaymentIntentId], OmitIfNone()] = None
    """The ID of the PaymentIntent that created the Payment."""

    status: PaymentStatus
    """The latest status of the Payment. Possible values are `paid` or `failed`."""

    payment_method: PaymentMethodDetails
    """The payment method used for the Payment."""

    refunded: Annotated[Optional[bool], OmitIfNone()] = None
    """`true` if the Payment was fully refunded."""

    customer: Annotated[Optional[OptionalCustomer], OmitIfNone()] = None
    """The customer associated with the Payment."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Payment. Useful reference when viewing Payment from [PayRex Dashboard](https://dashboard.payrexhq.com)."""

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""


class UpdatePayment(PayrexModel):
    """Query parameters when updating a payment."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Payment. Useful reference when viewing Payment from [PayRex Dashboard](https://dashboard.payrexhq.com)."""

    @classmethod
    def new(cls) -> "UpdatePayment":
        """Creates a new `UpdatePayment` instance."""
        return cls()

    def with_metadata(self, metadata: Metadata) -> "UpdatePayment":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self

    def with_description(self, description: object) -> "UpdatePayment":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self
