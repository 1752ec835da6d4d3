# Code generated by scripts/generate_models.py from payment_intents.yaml. DO NOT EDIT.
"""Payment Intent models."""
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import Field

from payrex.types.base import OmitIfNone, PayrexModel
from payrex.types.common import CaptureMethod, Currency, Metadata, PaymentMethod, PaymentMethodOptions, Timestamp
from payrex.types.ids import PaymentIntentId


class PaymentIntentStatus(str, Enum):
    """The status of a PaymentIntent describes the current state of the payment process."""

    AWAITING_PAYMENT_METHOD = "awaiting_payment_method"
    """Awaiting a valid payment method to be attached."""
    AWAITING_NEXT_ACTION = "awaiting_next_action"
    """Awaiting an action from the customer."""
    AWAITING_CAPTURE = "awaiting_capture"
    """The payment was authorized and can be captured."""
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    """The payment requires a payment method."""
    REQUIRES_CONFIRMATION = "requires_confirmation"
    """The payment requires confirmation before proceeding."""
    REQUIRES_ACTION = "requires_action"
    """The payment requires further action before proceeding."""
    PROCESSING = "processing"
    """The payment is being processed."""
    REQUIRES_CAPTURE = "requires_capture"
    """The payment requires capture."""
    CANCELED = "canceled"
    """The payment was cancelled."""
    SUCCEEDED = "succeeded"
    """The payment was successful."""


class NextAction(PayrexModel):
    """Tells you what actions you need to take so that your customer can make a payment using the selected method."""

    action_type: str = Field(alias="type")
    """The type of the next action to perform. The possible value is `redirect`."""

    redirect_url: Annotated[Optional[str], OmitIfNone()] = None
    """The URL for authenticating a payment by redirecting your customer."""


class PaymentError(PayrexModel):
    """The error returned in case of a failed payment attempt."""

    code: Annotated[Optional[str], OmitIfNone()] = None
    """The status code of the error."""

    message: Annotated[Optional[str], OmitIfNone()] = None
    """A message that provides more details about the error."""

    param: Annotated[Optional[str], OmitIfNone()] = None
    """If the error is parameter-specific, the parameter related to the error."""


class PaymentIntent(PayrexModel):
    """A PaymentIntent tracks the customer's payment lifecycle, keeping track of any failed payment
    attempts and ensuring the customer is only charged once.
    """

    id: PaymentIntentId
    """Unique identifier for the resource. The prefix is `pi_`."""

    amount_received: int
    """The amount already collected by the PaymentIntent, in cents."""

    amount_capturable: int
    """The amount that can be captured by the PaymentIntent, in cents."""

    client_secret: str
    """The client secret of this PaymentIntent used for client-side retrieval using a public API key."""

    latest_payment: Annotated[Optional[str], OmitIfNone()] = None
    """The Payment ID of the latest successful payment created by the PaymentIntent."""

    last_payment_error: Annotated[Optional[PaymentError], OmitIfNone()] = None
    """The error returned in case of a failed payment attempt."""

    payment_method_id: Annotated[Optional[str], OmitIfNone()] = None
    """The latest PaymentMethod ID attached to the PaymentIntent."""

    payment_methods: List[PaymentMethod]
    """The list of payment methods allowed to be processed by the PaymentIntent."""

    payment_method_options: Annotated[Optional[PaymentMethodOptions], OmitIfNone()] = None
    """A set of key-value pairs that can modify the behavior of the payment method attached to the payment intent."""

    statement_descriptor: Annotated[Optional[str], OmitIfNone()] = None
    """Text that appears on the customer's bank statement. This value overrides the merchant account's trade name."""

    status: PaymentIntentStatus
    """The latest status of the PaymentIntent."""

    next_action: Annotated[Optional[NextAction], OmitIfNone()] = None
    """If present, tells you what actions you need to take so that your customer can make a payment."""

    return_url: Annotated[Optional[str], OmitIfNone()] = None
    """The URL where your customer will be redirected after completing the authentication."""

    capture_before_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time by which the PaymentIntent must be captured to avoid being canceled."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Payment Intent. Useful reference when viewing paid payments from the [PayRex Dashboard](https://dashboard.payrexhq.com)."""

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""


class OptionalPaymentIntent(PayrexModel):
    """Optional variant for PaymentIntent. This is only used for responses in billing statements API."""

    id: Annotated[Optional[PaymentIntentId], OmitIfNone()] = None
    """Unique identifier for the resource. The prefix is `pi_`."""

    amount_received: Annotated[Optional[int], OmitIfNone()] = None
    """The amount already collected by the PaymentIntent, in cents."""

    amount_capturable: Annotated[Optional[int], OmitIfNone()] = None
    """The amount that can be captured by the PaymentIntent, in cents."""

    client_secret: Annotated[Optional[str], OmitIfNone()] = None
    """The client secret of this PaymentIntent used for client-side retrieval using a public API key."""

    latest_payment: Annotated[Optional[str], OmitIfNone()] = None
    """The Payment ID of the latest successful payment created by the PaymentIntent."""

    last_payment_error: Annotated[Optional[PaymentError], OmitIfNone()] = None
    """The error returned in case of a failed payment attempt."""

    payment_method_id: Annotated[Optional[str], OmitIfNone()] = None
    """The latest PaymentMethod ID attached to the PaymentIntent."""

    payment_methods: Annotated[Optional[List[PaymentMethod]], OmitIfNone()] = None
    """The list of payment methods allowed to be processed by the PaymentIntent."""

    payment_method_options: Annotated[Optional[PaymentMethodOptions], OmitIfNone()] = None
    """A set of key-value pairs that can modify the behavior of the payment method attached to the payment intent."""

    statement_descriptor: Annotated[Optional[str], OmitIfNone()] = None
    """Text that appears on the customer's bank statement. This value overrides the merchant account's trade name."""

    status: Annotated[Optional[PaymentIntentStatus], OmitIfNone()] = None
    """The latest status of the PaymentIntent."""

    next_action: Annotated[Optional[NextAction], OmitIfNone()] = None
    """If present, tells you what actions you need to take so that your customer can make a payment."""

    return_url: Annotated[Optional[str], OmitIfNone()] = None
    """The URL where your customer will be redirected after completing the authentication."""

    capture_before_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time by which the PaymentIntent must be captured to avoid being canceled."""

    amount: Annotated[Optional[int], OmitIfNone()] = None
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Payment Intent. Useful reference when viewing paid payments from the [PayRex Dashboard](https://dashboard.payrexhq.com)."""

    livemode: Annotated[Optional[bool], OmitIfNone()] = None
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time the resource was updated and measured in seconds since the Unix epoch."""

    currency: Annotated[Optional[Currency], OmitIfNone()] = None
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""


class CreatePaymentIntent(PayrexModel):
    """Query parameters when creating a payment intent."""

    payment_methods: List[PaymentMethod]
    """The list of payment methods allowed to be processed by the PaymentIntent. Possible values are `card`, `gcash`, `maya`, and `qrph`."""

    capture_method: Annotated[Optional[CaptureMethod], OmitIfNone()] = None
    """Describes the `capture_method` of a card payment. Possible values are `automatic` or `manual`."""

    payment_method_options: Annotated[Optional[PaymentMethodOptions], OmitIfNone()] = None
    """A set of key-value pairs that can modify the behavior of the payment method attached to the payment intent."""

    statement_descriptor: Annotated[Optional[str], OmitIfNone()] = None
    """Text that appears on the customer's bank statement. This value overrides the merchant account's trade name."""

    return_url: Annotated[Optional[str], OmitIfNone()] = None
    """The URL where your customer will be redirected after completing the authentication."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Payment Intent. Useful reference when viewing paid payments from the [PayRex Dashboard](https://dashboard.payrexhq.com)."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""

    @classmethod
    def new(cls, payment_methods: List[PaymentMethod], amount: int, currency: Currency) -> "CreatePaymentIntent":
        """Creates a new `CreatePaymentIntent` instance."""
        return cls(payment_methods=payment_methods, amount=amount, currency=currency)

    def with_capture_method(self, capture_method: CaptureMethod) -> "CreatePaymentIntent":
        """Sets the capture method when creating a payment intent."""
        self.capture_method = capture_method
        return self

    def with_payment_method_options(self, payment_method_options: PaymentMethodOptions) -> "CreatePaymentIntent":
        """Sets the payment method options when creating a payment intent."""
        self.payment_method_options = payment_method_options
        return self

    def with_statement_descriptor(self, statement_descriptor: object) -> "CreatePaymentIntent":
        """Sets the statement descriptor when creating a payment intent."""
        self.statement_descriptor = str(statement_descriptor)
        return self

    def with_return_url(self, return_url: object) -> "CreatePaymentIntent":
        """Sets the return URL when creating a payment intent."""
        self.return_url = str(return_url)
        return self

    def with_metadata(self, metadata: Metadata) -> "CreatePaymentIntent":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self

    def with_description(self, description: object) -> "CreatePaymentIntent":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self


class CapturePaymentIntent(PayrexModel):
    """Query parameters when capturing a payment intent."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    @classmethod
    def new(cls, amount: int) -> "CapturePaymentIntent":
        """Creates a new `CapturePaymentIntent` instance."""
        return cls(amount=amount)
