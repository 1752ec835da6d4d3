"""Event types, in ``<resource>.<event>`` form."""
from enum import Enum


class EventType(str, Enum):
    """Type of an Event resource, as sent to webhooks."""

    BILLING_STATEMENT_CREATED = "billing_statement.created"
    BILLING_STATEMENT_UPDATED = "billing_statement.updated"
    BILLING_STATEMENT_DELETED = "billing_statement.deleted"
    BILLING_STATEMENT_FINALIZED = "billing_statement.finalized"
    BILLING_STATEMENT_SENT = "billing_statement.sent"
    BILLING_STATEMENT_MARKED_UNCOLLECTIBLE = "billing_statement.marked_uncollectible"
    BILLING_STATEMENT_VOIDED = "billing_statement.voided"
    BILLING_STATEMENT_PAID = "billing_statement.paid"
    BILLING_STATEMENT_WILL_BE_DUE = "billing_statement.will_be_due"
    BILLING_STATEMENT_OVERDUE = "billing_statement.overdue"
    BILLING_STATEMENT_LINE_ITEM_CREATED = "billing_statement_line_item.created"
    BILLING_STATEMENT_LINE_ITEM_UPDATED = "billing_statement_line_item.updated"
    BILLING_STATEMENT_LINE_ITEM_DELETED = "billing_statement_line_item.deleted"
    CHECKOUT_SESSION_EXPIRED = "checkout_session.expired"
    PAYMENT_INTENT_AWAITING_CAPTURE = "payment_intent.awaiting_capture"
    PAYMENT_INTENT_SUCCEEDED = "payment_intent.succeeded"
    PAYOUT_DEPOSITED = "payout.deposited"
    REFUND_CREATED = "refund.created"
    REFUND_UPDATED = "refund.updated"

    @property
    def resource(self) -> str:
        """Resource part of the type, e.g. ``refund`` for ``refund.created``."""
        return self.value.split(".", 1)[0]

    @property
    def action(self) -> str:
        return self.value.split(".", 1)[1]

    def __str__(self) -> str:
        return self.value
