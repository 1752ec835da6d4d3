"""Shared fixtures: API response bodies and a recording mock transport."""
from typing import Any, Callable, Dict, List

import httpx
import pytest

from payrex import Client

CREATED_AT = 1717000000
UPDATED_AT = 1717000500


def stamps() -> Dict[str, Any]:
    return {"livemode": False, "created_at": CREATED_AT, "updated_at": UPDATED_AT}


def customer_body(**overrides) -> Dict[str, Any]:
    body = {
        "id": "cus_123",
        "email": "juan@example.com",
        "name": "Juan Dela Cruz",
        "billing_statement_prefix": "JDC",
        "metadata": {"tier": "gold"},
        "currency": "PHP",
        **stamps(),
    }
    body.update(overrides)
    return body


def payment_intent_body(**overrides) -> Dict[str, Any]:
    body = {
        "id": "pi_123",
        "amount": 10000,
        "amount_received": 0,
        "amount_capturable": 0,
        "client_secret": "pi_123_secret_abc",
        "payment_methods": ["card", "gcash"],
        "status": "awaiting_payment_method",
        "currency": "PHP",
        **stamps(),
    }
    body.update(overrides)
    return body


def payment_body(**overrides) -> Dict[str, Any]:
    body = {
        "id": "pay_123",
        "amount": 4569600,
        "amount_refunded": 0,
        "fee": 2500,
        "status": "paid",
        "payment_intent_id": "pi_123",
        "payment_method": {"type": "card", "card": {"first6": "424242", "last4": "4242"}},
        "description": "New description",
        "metadata": {"order_id": "order_238afec81"},
        "currency": "PHP",
        **stamps(),
    }
    body.update(overrides)
    return body


def webhook_body(**overrides) -> Dict[str, Any]:
    body = {
        "id": "wh_123",
        "secret_key": "whsk_abc",
        "status": "enabled",
        "url": "https://example.com/hooks",
        "events": ["payment_intent.succeeded"],
        "description": "Order notifications",
        **stamps(),
    }
    body.update(overrides)
    return body


def page(*items: Dict[str, Any], has_more: bool = False) -> Dict[str, Any]:
    return {"object": "list", "data": list(items), "has_more": has_more}


class Recorder:
    """Mock transport handler that records requests and replies from a route table."""

    def __init__(self, routes: Dict[str, Callable[[httpx.Request], httpx.Response]]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.method} {request.url.path}"
        if key not in self.routes:
            return httpx.Response(404, json={"errors": [{"code": "resource_not_found", "detail": key}]})
        return self.routes[key](request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def reply(status_code: int = 200, body: Any = None, **kwargs) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        if body is None:
            return httpx.Response(status_code, **kwargs)
        return httpx.Response(status_code, json=body, **kwargs)
    return handler


@pytest.fixture
def make_client():
    """Build a Client whose requests go to a Recorder instead of the network."""
    def factory(routes: Dict[str, Callable[[httpx.Request], httpx.Response]]):
        recorder = Recorder(routes)
        client = Client("sk_test_123", transport=httpx.MockTransport(recorder))
        return client, recorder
    return factory
