# Code generated by scripts/generate_models.py from billing_statements.yaml. DO NOT EDIT.
"""Billing Statement models."""
from enum import Enum
from typing import Annotated, List, Optional

from payrex.models.billing_statement_line_items import BillingStatementLineItem
from payrex.models.customers import OptionalCustomer
from payrex.models.payment_intents import OptionalPaymentIntent
from payrex.types.base import OmitIfNone, PayrexModel
from payrex.types.common import Currency, Metadata, PaymentMethod, Timestamp
from payrex.types.ids import BillingStatementId, CustomerId


class BillingStatementStatus(str, Enum):
    """The latest status of a BillingStatement."""

    DRAFT = "draft"
    """The latest status is draft."""
    OPEN = "open"
    """The latest status is open."""
    PAID = "paid"
    """The latest status is paid."""
    VOID = "void"
    """The latest status is void."""
    UNCOLLECTIBLE = "uncollectible"
    """The latest status is uncollectible."""


class PaymentSettings(PayrexModel):
    """Payment settings for a billing statement."""

    payment_methods: List[PaymentMethod]
    """The list of payment methods allowed to be processed by the payment intent of the billing statement."""


class BillingStatement(PayrexModel):
    """Billing statements are one-time payment links that contain customer information, the due date,
    and an itemized list of your business's products or services.
    """

    id: BillingStatementId
    """Unique identifier for the resource. The prefix is `bstm_`."""

    billing_details_collection: Annotated[Optional[str], OmitIfNone()] = None
    """Defines if the billing information fields will always show or managed by PayRex. Default value is `always`."""

    customer_id: CustomerId
    """The ID of the customer resource the billing statement belongs to."""

    due_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time when the billing statement is expected to be paid, measured in seconds since the Unix epoch."""

    finalized_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time when the billing statement was finalized, measured in seconds since the Unix epoch."""

    billing_statement_merchant_name: Annotated[Optional[str], OmitIfNone()] = None
    """The name of the merchant where the billing statement belongs to."""

    billing_statement_number: Annotated[Optional[str], OmitIfNone()] = None
    """The number associated with the billing statement."""

    billing_statement_url: Annotated[Optional[str], OmitIfNone()] = None
    """The URL that your customer will access to pay the billing statement. Only visible while the status is `open`."""

    line_items: Annotated[Optional[List[BillingStatementLineItem]], OmitIfNone()] = None
    """This attribute holds the billing statement's list of line items."""

    payment_intent: Annotated[Optional[OptionalPaymentIntent], OmitIfNone()] = None
    """The PaymentIntent resource created for the billing statement."""

    setup_future_usage: Annotated[Optional[str], OmitIfNone()] = None
    """The setup for future usage of this billing statement."""

    statement_descriptor: Annotated[Optional[str], OmitIfNone()] = None
    """This attribute holds the statement descriptor for the billing statement."""

    status: BillingStatementStatus
    """The latest status of the billing statement. Possible values are `draft`, `open`, `paid`, `void` or `uncollectible`."""

    payment_settings: PaymentSettings
    """Set of key-value pairs that can modify the behavior of the payment processing for the billing statement."""

    customer: Annotated[Optional[OptionalCustomer], OmitIfNone()] = None
    """The customer resource that is associated with the billing statement."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the billing statement and copied over to its payment intent. This is a useful reference when viewing the payment resources associated with the billing statement from the PayRex Dashboard.

    If the description is not modified, the default value is "Payment for Billing Statement <billing statement number>"
    """

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""


class CreateBillingStatement(PayrexModel):
    """Query parameters when creating a billing statement."""

    customer_id: CustomerId
    """The ID of the customer resource the billing statement belongs to."""

    payment_settings: Annotated[Optional[PaymentSettings], OmitIfNone()] = None
    """Set of key-value pairs that can modify the behavior of the payment processing for the billing statement."""

    billing_details_collection: Annotated[Optional[str], OmitIfNone()] = None
    """Defines if the billing information fields will always show or managed by PayRex. Default value is `always`."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the billing statement and copied over to its payment intent. This is a useful reference when viewing the payment resources associated with the billing statement from the PayRex Dashboard.

    If the description is not modified, the default value is "Payment for Billing Statement <billing statement number>"
    """

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""

    @classmethod
    def new(cls, customer_id: CustomerId, currency: Currency) -> "CreateBillingStatement":
        """Creates a new `CreateBillingStatement` instance."""
        return cls(customer_id=customer_id, currency=currency)

    def with_payment_settings(self, payment_settings: PaymentSettings) -> "CreateBillingStatement":
        """Sets the payment settings when creating a billing statement."""
        self.payment_settings = payment_settings
        return self

    def with_billing_details_collection(self, billing_details_collection: object) -> "CreateBillingStatement":
        """Sets the billing details collection when creating a billing statement."""
        self.billing_details_collection = str(billing_details_collection)
        return self

    def with_metadata(self, metadata: Metadata) -> "CreateBillingStatement":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self

    def with_description(self, description: object) -> "CreateBillingStatement":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self


class UpdateBillingStatement(PayrexModel):
    """Query parameters when updating a billing statement."""

    customer_id: Annotated[Optional[CustomerId], OmitIfNone()] = None
    """The ID of the customer resource the billing statement belongs to."""

    payment_settings: Annotated[Optional[PaymentSettings], OmitIfNone()] = None
    """Set of key-value pairs that can modify the behavior of the payment processing for the billing statement."""

    billing_details_collection: Annotated[Optional[str], OmitIfNone()] = None
    """Defines if the billing information fields will always show or managed by PayRex."""

    due_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time when the billing statement is expected to be paid, measured in seconds since the Unix epoch."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the billing statement and copied over to its payment intent. This is a useful reference when viewing the payment resources associated with the billing statement from the PayRex Dashboard.

    If the description is not modified, the default value is "Payment for Billing Statement <billing statement number>"
    """

    @classmethod
    def new(cls) -> "UpdateBillingStatement":
        """Creates a new `UpdateBillingStatement` instance."""
        return cls()

    def with_customer_id(self, customer_id: CustomerId) -> "UpdateBillingStatement":
        """Sets the customer ID before updating a billing statement."""
        self.customer_id = customer_id
        return self

    def with_payment_settings(self, payment_settings: PaymentSettings) -> "UpdateBillingStatement":
        """Sets the payment settings before updating a billing statement."""
        self.payment_settings = payment_settings
        return self

    def with_billing_details_collection(self, billing_details_collection: object) -> "UpdateBillingStatement":
        """Sets the billing details collection before updating a billing statement."""
        self.billing_details_collection = str(billing_details_collection)
        return self

    def with_due_at(self, due_at: Timestamp) -> "UpdateBillingStatement":
        """Sets the deadline for the billing statement at a specified date."""
        self.due_at = due_at
        return self

    def with_metadata(self, metadata: Metadata) -> "UpdateBillingStatement":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self

    def with_description(self, description: object) -> "UpdateBillingStatement":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self
