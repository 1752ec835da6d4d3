# Code generated by scripts/generate_models.py from payouts.yaml. DO NOT EDIT.
"""Payout models."""
from enum import Enum
from typing import Annotated, Optional

from payrex.types.base import OmitIfNone, PayrexModel
from payrex.types.common import Timestamp
from payrex.types.ids import PayoutId, PayoutTransactionId


class PayoutStatus(str, Enum):
    """The status of a Payout."""

    PENDING = "pending"
    """The payout is currently pending."""
    IN_TRANSIT = "in_transit"
    """The payout is in transit."""
    FAILED = "failed"
    """The payout failed."""
    SUCCESSFUL = "successful"
    """The payout was deposited to the bank account."""
    CANCELLED = "cancelled"
    """The payout was cancelled."""


class PayoutTransactionType(str, Enum):
    """The transaction type of a Payout Transaction."""

    PAYMENT = "payment"
    """The transaction type is a payment."""
    REFUND = "refund"
    """The transaction type is a refund."""
    ADJUSTMENT = "adjustment"
    """The transaction type is an adjustment."""


class PayoutDestination(PayrexModel):
    """The bank account nominated for your PayRex merchant account."""

    account_name: str
    """The account name of the bank account."""

    account_number: str
    """The account number of the bank account."""

    bank_name: str
    """The name of the bank."""


class Payout(PayrexModel):
    """The Payout resource is created when you are scheduled to receive money from PayRex. A Payout
    represents a net amount of money settled to your nominated bank account.
    """

    id: PayoutId
    """Unique identifier for the resource. The prefix is `po_`."""

    destination: Annotated[Optional[PayoutDestination], OmitIfNone()] = None
    """The bank account that you nominated for your PayRex merchant account."""

    net_amount: Annotated[Optional[int], OmitIfNone()] = None
    """The final computed amount that will be transferred to the bank account, in cents."""

    status: PayoutStatus
    """The status of the Payout."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""


class PayoutTransaction(PayrexModel):
    """A Payout Transaction represents a line item of a Payout."""

    id: PayoutTransactionId
    """Unique identifier for the resource. The prefix is `po_txn_`."""

    net_amount: int
    """The net amount of the Payout Transaction, in cents. Negative values are debits to your final payout."""

    transaction_id: str
    """The ID of the Payment, Refund or Adjustment resource behind the transaction."""

    transaction_type: PayoutTransactionType
    """The transaction type of the Payout Transaction."""

    amount: int
    """The amount of the payment to be transferred to your PayRex merchant account. This is a positive integer that your customer paid in the smallest currency unit, cents. If the customer paid ₱ 120.50, the amount of the Payment should be 12050.

    The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 (5999999999 in cents).
    """

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""
