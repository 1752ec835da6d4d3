"""Resource identifiers. Each is a plain string on the wire."""
from typing import NewType

CustomerId = NewType("CustomerId", str)
PaymentIntentId = NewType("PaymentIntentId", str)
PaymentId = NewType("PaymentId", str)
CheckoutSessionId = NewType("CheckoutSessionId", str)
CheckoutSessionLineItemId = NewType("CheckoutSessionLineItemId", str)
BillingStatementId = NewType("BillingStatementId", str)
BillingStatementLineItemId = NewType("BillingStatementLineItemId", str)
RefundId = NewType("RefundId", str)
PayoutId = NewType("PayoutId", str)
PayoutTransactionId = NewType("PayoutTransactionId", str)
WebhookId = NewType("WebhookId", str)
EventId = NewType("EventId", str)
