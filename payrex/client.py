"""PayRex API client."""
import logging
from typing import Optional

import httpx

from payrex.core.config import Settings, settings as default_settings
from payrex.core.errors import (
    InvalidApiKeyError,
    live_key_in_test_mode,
    missing_api_key,
    public_api_key,
)
from payrex.core.http import HttpClient
from payrex.resources.billing_statement_line_items import BillingStatementLineItems
from payrex.resources.billing_statements import BillingStatements
from payrex.resources.checkout_sessions import CheckoutSessions
from payrex.resources.customers import Customers
from payrex.resources.events import Events
from payrex.resources.payment_intents import PaymentIntents
from payrex.resources.payments import Payments
from payrex.resources.payouts import Payouts
from payrex.resources.refunds import Refunds
from payrex.resources.webhooks import Webhooks

log = logging.getLogger(__name__)

PUBLIC_KEY_PREFIX = "pk_"
LIVE_KEY_PREFIX = "sk_live_"


def validate_api_key(api_key: Optional[str], test_mode: bool = False) -> str:
    """
    Check that `api_key` is a usable secret key.

    Raises:
        InvalidApiKeyError: If the key is missing, empty, public, or live while in test mode
    """
    if not api_key or not api_key.strip():
        raise InvalidApiKeyError(missing_api_key())
    api_key = api_key.strip()
    if api_key.startswith(PUBLIC_KEY_PREFIX):
        raise InvalidApiKeyError(public_api_key())
    if test_mode and api_key.startswith(LIVE_KEY_PREFIX):
        raise InvalidApiKeyError(live_key_in_test_mode())
    return api_key


class Client:
    """
    Entry point to the PayRex API.

    Example:
        client = Client("sk_test_...")
        customer = await client.customers.retrieve(CustomerId("cus_..."))

    Args:
        api_key: Secret key; falls back to ``PAYREX_API_KEY``
        settings: Settings to use instead of the environment-loaded defaults
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = settings or default_settings
        key = validate_api_key(api_key if api_key is not None else settings.api_key, settings.test_mode)
        self.settings = settings.model_copy(update={"api_key": key})
        self.http = HttpClient(self.settings, transport=transport)

        self.customers = Customers(self.http)
        self.payment_intents = PaymentIntents(self.http)
        self.payments = Payments(self.http)
        self.checkout_sessions = CheckoutSessions(self.http)
        self.billing_statements = BillingStatements(self.http)
        self.billing_statement_line_items = BillingStatementLineItems(self.http)
        self.refunds = Refunds(self.http)
        self.payouts = Payouts(self.http)
        self.webhooks = Webhooks(self.http)
        self.events = Events(self.http)

        log.debug("PayRex client ready for %s (test_mode=%s)", self.settings.api_base_url, self.settings.test_mode)
