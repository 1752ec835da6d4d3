# Code generated by scripts/generate_models.py from refunds.yaml. DO NOT EDIT.
"""Refund models."""
from enum import Enum
from typing import Annotated, Optional

from payrex.types.base import OmitIfNone, PayrexModel
from payrex.types.common import Currency, Metadata, Timestamp
from payrex.types.ids import PaymentId, RefundId


class RefundStatus(str, Enum):
    """The latest status of a Refund."""

    PENDING = "pending"
    """Refund status when a refund is pending."""
    SUCCEEDED = "succeeded"
    """Refund status when a refund succeeded."""
    FAILED = "failed"
    """Refund status when a refund failed."""


class RefundReason(str, Enum):
    """The reason of a Refund."""

    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"
    PRODUCT_OUT_OF_STOCK = "product_out_of_stock"
    PRODUCT_WAS_DAMAGED = "product_was_damaged"
    SERVICE_NOT_PROVIDED = "service_not_provided"
    SERVICE_MISALIGNED = "service_misaligned"
    WRONG_PRODUCT_RECEIVED = "wrong_product_received"
    OTHERS = "others"


class Refund(PayrexModel):
    """A Refund resource represents a refunded amount of a paid payment."""

    id: RefundId
    """Unique identifier for the resource. The prefix is `re_`."""

    status: RefundStatus
    """The latest status of the Refund. Possible values are `succeeded`, `failed`, or `pending`."""

    reason: RefundReason
    """The reason of the Refund. Use `remarks` to explain a reason of `others`."""

    remarks: Annotated[Optional[str], OmitIfNone()] = None
    """Remarks about the Refund resource."""

    payment_id: PaymentId
    """The ID of the payment to be refunded."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Refund."""

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""


class CreateRefund(PayrexModel):
    """Query parameters when creating a refund."""

    payment_id: PaymentId
    """The ID of the payment to be refunded."""

    reason: RefundReason
    """The reason of the Refund. Use `remarks` to explain a reason of `others`."""

    remarks: Annotated[Optional[str], OmitIfNone()] = None
    """Remarks about the Refund resource."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Refund."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""

    @classmethod
    def new(cls, payment_id: PaymentId, reason: RefundReason, amount: int, currency: Currency) -> "CreateRefund":
        """Creates a new `CreateRefund` instance."""
        return cls(payment_id=payment_id, reason=reason, amount=amount, currency=currency)

    def with_remarks(self, remarks: object) -> "CreateRefund":
        """Sets the remarks when refund status is set to `others` when creating a refund."""
        self.remarks = str(remarks)
        return self

    def with_metadata(self, metadata: Metadata) -> "CreateRefund":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self

    def with_description(self, description: object) -> "CreateRefund":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self


class UpdateRefund(PayrexModel):
    """Query parameters when updating a refund."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    @classmethod
    def new(cls) -> "UpdateRefund":
        """Creates a new `UpdateRefund` instance."""
        return cls()

    def with_metadata(self, metadata: Metadata) -> "UpdateRefund":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self
