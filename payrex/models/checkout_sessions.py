# Code generated by scripts/generate_models.py from checkout_sessions.yaml. DO NOT EDIT.
"""Checkout Session models."""
from enum import Enum
from typing import Annotated, List, Optional

from payrex.models.payment_intents import PaymentIntent
from payrex.types.base import OmitIfNone, PayrexModel
from payrex.types.common import Currency, Metadata, PaymentMethod, PaymentMethodOptions, Timestamp
from payrex.types.ids import CheckoutSessionId, CheckoutSessionLineItemId


class CheckoutSessionStatus(str, Enum):
    """The latest status of a CheckoutSession."""

    ACTIVE = "active"
    """The checkout session is active."""
    COMPLETED = "completed"
    """The checkout session was completed."""
    EXPIRED = "expired"
    """The checkout session expired."""


class CheckoutSessionLineItem(PayrexModel):
    """An item to pay during a checkout session."""

    id: Annotated[Optional[CheckoutSessionLineItemId], OmitIfNone()] = None
    """Unique identifier for the resource. The prefix is `cs_li_`."""

    name: str
    """The name of the line item. It could be a product name or the service that you offer."""

    quantity: int
    """The quantity of the line item. The quantity will be multiplied by the `line_item.amount` to compute the final amount of the CheckoutSession."""

    image: Annotated[Optional[str], OmitIfNone()] = None
    """The image of the line item. This should be a publicly accessible URL."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the CheckoutSession. Useful reference when viewing paid Payment from PayRex Dashboard."""

    @classmethod
    def new(cls, name: object, quantity: int, amount: int) -> "CheckoutSessionLineItem":
        """Creates a new `CheckoutSessionLineItem` instance."""
        return cls(name=str(name), quantity=quantity, amount=amount)

    def with_id(self, id: CheckoutSessionLineItemId) -> "CheckoutSessionLineItem":
        """Sets the checkout session line item ID."""
        self.id = id
        return self

    def with_image(self, image: object) -> "CheckoutSessionLineItem":
        """Sets the public image URL of the line item."""
        self.image = str(image)
        return self

    def with_description(self, description: object) -> "CheckoutSessionLineItem":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self


class CheckoutSession(PayrexModel):
    """A Checkout Session resource represents a one-time use PayRex-hosted checkout page and will
    expire at a certain period.
    """

    id: CheckoutSessionId
    """Unique identifier for the resource. The prefix is `cs_`."""

    customer_reference_id: Annotated[Optional[str], OmitIfNone()] = None
    """A unique reference of the CheckoutSession aside from the `id` attribute, such as an order ID or a cart ID."""

    billing_details_collection: Annotated[Optional[str], OmitIfNone()] = None
    """Defines if the billing information fields will always show or managed by PayRex. Default value is `always`."""

    client_secret: Annotated[Optional[str], OmitIfNone()] = None
    """The client secret of the CheckoutSession."""

    status: CheckoutSessionStatus
    """The latest status of the CheckoutSession. Possible values are `active`, `completed`, or `expired`."""

    line_items: List[CheckoutSessionLineItem]
    """This attribute holds your customer's list of items to pay."""

    url: str
    """The URL where your customer will be redirected to complete a payment."""

    payment_intent: Annotated[Optional[PaymentIntent], OmitIfNone()] = None
    """The Payment Intent resource created for the CheckoutSession."""

    success_url: Annotated[Optional[str], OmitIfNone()] = None
    """The URL where your customer will be redirected after a successful payment."""

    cancel_url: Annotated[Optional[str], OmitIfNone()] = None
    """The URL where your customer will be redirected if they decide not to continue with the payment."""

    payment_methods: Annotated[Optional[List[PaymentMethod]], OmitIfNone()] = None
    """The list of payment methods allowed to be processed by the CheckoutSession."""

    payment_method_options: Annotated[Optional[PaymentMethodOptions], OmitIfNone()] = None
    """A set of key-value pairs that can modify the behavior of the payment method attached to the payment intent of the checkout session."""

    submit_type: Annotated[Optional[str], OmitIfNone()] = None
    """The text for the pay button of the CheckoutSession. The default value is `pay`."""

    statement_descriptor: Annotated[Optional[str], OmitIfNone()] = None
    """Text that appears on the customer's bank statement. This value overrides the merchant account's trade name."""

    expires_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time when the CheckoutSession will expire, measured in seconds since the Unix epoch."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the CheckoutSession. Useful reference when viewing paid Payment from PayRex Dashboard."""

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""


class CreateCheckoutSession(PayrexModel):
    """Query parameters when creating a checkout session."""

    customer_reference_id: Annotated[Optional[str], OmitIfNone()] = None
    """A unique reference of the CheckoutSession aside from the `id` attribute, such as an order ID or a cart ID."""

    line_items: List[CheckoutSessionLineItem]
    """This attribute holds your customer's list of items to pay."""

    success_url: str
    """The URL where your customer will be redirected after a successful payment."""

    cancel_url: str
    """The URL where your customer will be redirected if they decide not to continue with the payment."""

    payment_methods: List[PaymentMethod]
    """The list of payment methods allowed to be processed by the CheckoutSession."""

    payment_method_options: Annotated[Optional[PaymentMethodOptions], OmitIfNone()] = None
    """A set of key-value pairs that can modify the behavior of the payment method attached to the payment intent of the checkout session."""

    expires_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time when the CheckoutSession will expire. If not passed, the CheckoutSession expires in 24 hours."""

    billing_details_collection: Annotated[Optional[str], OmitIfNone()] = None
    """Defines if the billing information fields will always show or managed by PayRex. Default value is `always`."""

    submit_type: Annotated[Optional[str], OmitIfNone()] = None
    """The text for the pay button of the CheckoutSession. The default value is `pay`."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the CheckoutSession. Useful reference when viewing paid Payment from PayRex Dashboard."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""

    @classmethod
    def new(cls, line_items: List[CheckoutSessionLineItem], success_url: object, cancel_url: object, payment_methods: List[PaymentMethod], currency: Currency) -> "CreateCheckoutSession":
        """Creates a new `CreateCheckoutSession` instance."""
        return cls(line_items=line_items, success_url=str(success_url), cancel_url=str(cancel_url), payment_methods=payment_methods, currency=currency)

    def with_customer_reference_id(self, customer_reference_id: object) -> "CreateCheckoutSession":
        """Sets the customer reference ID when creating a checkout session."""
        self.customer_reference_id = str(customer_reference_id)
        return self

    def with_payment_method_options(self, payment_method_options: PaymentMethodOptions) -> "CreateCheckoutSession":
        """Sets the payment method options when creating a checkout session."""
        self.payment_method_options = payment_method_options
        return self

    def with_expires_at(self, expires_at: Timestamp) -> "CreateCheckoutSession":
        """Sets the expiration date for a checkout session during its creation."""
        self.expires_at = expires_at
        return self

    def with_billing_details_collection(self, billing_details_collection: object) -> "CreateCheckoutSession":
        """Sets the billing details collection when creating a checkout session."""
        self.billing_details_collection = str(billing_details_collection)
        return self

    def with_submit_type(self, submit_type: object) -> "CreateCheckoutSession":
        """Sets the submit type when creating a checkout session."""
        self.submit_type = str(submit_type)
        return self

    def with_metadata(self, metadata: Metadata) -> "CreateCheckoutSession":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self

    def with_description(self, description: object) -> "CreateCheckoutSession":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self
