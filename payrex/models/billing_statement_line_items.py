# Code generated by scripts/generate_models.py from billing_statement_line_items.yaml. DO NOT EDIT.
"""Billing Statement Line Item models."""
from typing import Annotated, Optional

from payrex.types.base import OmitIfNone, PayrexModel
from payrex.types.common import Timestamp
from payrex.types.ids import BillingStatementId, BillingStatementLineItemId


class BillingStatementLineItem(PayrexModel):
    """A line item of a billing statement that pertains to a business's products or services."""

    id: BillingStatementLineItemId
    """Unique identifier for the resource. The prefix is `bstm_li_`."""

    unit_price: int
    """The amount of the line item in a single unit, in cents."""

    quantity: int
    """The quantity of the line item. The quantity is multiplied by the unit price to compute the final amount of the billing statement."""

    billing_statement_id: BillingStatementId
    """The ID of the billing statement where the line item is associated."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """The description attribute describes the line item of the billing statement. It could be a product you sell or a service you provide to your customers."""

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""


class CreateBillingStatementLineItem(PayrexModel):
    """Query parameters when creating a billing statement line item."""

    billing_statement_id: BillingStatementId
    """The ID of the billing statement resource where the line item is added."""

    unit_price: int
    """The amount of the line item in a single unit, in cents."""

    quantity: int
    """The quantity of the line item."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """The description attribute describes the line item of the billing statement. It could be a product you sell or a service you provide to your customers."""

    @classmethod
    def new(cls, billing_statement_id: BillingStatementId, unit_price: int, quantity: int) -> "CreateBillingStatementLineItem":
        """Creates a new `CreateBillingStatementLineItem` instance."""
        return cls(billing_statement_id=billing_statement_id, unit_price=unit_price, quantity=quantity)

    def with_description(self, description: object) -> "CreateBillingStatementLineItem":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self


class UpdateBillingStatementLineItem(PayrexModel):
    """Query parameters when updating a billing statement line item."""

    unit_price: Annotated[Optional[int], OmitIfNone()] = None
    """The amount of the line item in a single unit, in cents."""

    quantity: Annotated[Optional[int], OmitIfNone()] = None
    """The quantity of the line item."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """The description attribute describes the line item of the billing statement. It could be a product you sell or a service you provide to your customers."""

    @classmethod
    def new(cls) -> "UpdateBillingStatementLineItem":
        """Creates a new `UpdateBillingStatementLineItem` instance."""
        return cls()

    def with_unit_price(self, unit_price: int) -> "UpdateBillingStatementLineItem":
        """Sets the unit price for a line item in the billing statement."""
        self.unit_price = unit_price
        return self

    def with_quantity(self, quantity: int) -> "UpdateBillingStatementLineItem":
        """Sets the quantity for a line item in the billing statement."""
        self.quantity = quantity
        return self

    def with_description(self, description: object) -> "UpdateBillingStatementLineItem":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self
