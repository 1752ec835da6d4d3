"""Tests for runtime types and generated models."""
from datetime import datetime, timezone

from conftest import CREATED_AT, customer_body, payment_body, webhook_body

from payrex.models.billing_statements import BillingStatement
from payrex.models.customers import Customer, CustomerListParams, OptionalCustomer
from payrex.models.events import Event
from payrex.models.payments import Payment, UpdatePayment
from payrex.models.webhooks import CreateWebhook, UpdateWebhook, Webhook, WebhookListParams
from payrex.types.common import Deleted, Timestamp
from payrex.types.event import EventType
from payrex.types.ids import WebhookId
from payrex.types.pagination import MAX_LIMIT, ListParams, PaginatedList, clamp_limit


def test_clamp_limit_bounds():
    assert clamp_limit(0) == 1
    assert clamp_limit(-5) == 1
    assert clamp_limit(50) == 50
    assert clamp_limit(1000) == MAX_LIMIT


def test_list_params_clamp_on_construction_and_setter():
    assert ListParams(limit=250).limit == 100
    params = ListParams().with_limit(0).with_after("cus_1").with_before("cus_9")
    assert params.limit == 1
    assert params.model_dump() == {"limit": 1, "after": "cus_1", "before": "cus_9"}


def test_empty_list_params_dump_nothing():
    assert ListParams().model_dump() == {}


def test_flattened_list_params_round_trip():
    params = CustomerListParams(list_params=ListParams(limit=10)).with_email("juan@example.com")
    assert params.model_dump() == {"limit": 10, "email": "juan@example.com"}

    parsed = CustomerListParams.model_validate({"limit": 5, "after": "cus_1", "name": "Juan"})
    assert parsed.list_params.limit == 5
    assert parsed.list_params.after == "cus_1"
    assert parsed.name == "Juan"


def test_paginated_list_helpers():
    empty = PaginatedList[Customer].empty()
    assert empty.is_empty()
    assert len(empty) == 0
    assert empty.total_count == 0

    page = PaginatedList[Customer].model_validate({
        "object": "list",
        "data": [customer_body(), customer_body(id="cus_456")],
        "has_more": True,
    })
    assert len(page) == 2
    assert [c.id for c in page] == ["cus_123", "cus_456"]
    assert page.has_more


def test_timestamp_parses_and_serializes_as_int():
    customer = Customer.model_validate(customer_body())
    assert isinstance(customer.created_at, Timestamp)
    assert customer.created_at.to_datetime() == datetime.fromtimestamp(CREATED_AT, tz=timezone.utc)
    assert customer.model_dump(mode="json")["created_at"] == CREATED_AT
    assert Timestamp.from_unix(5) == 5


def test_omit_if_none_drops_absent_optionals():
    customer = Customer.model_validate(customer_body(name=None, metadata=None))
    dumped = customer.model_dump(mode="json")
    assert "name" not in dumped
    assert "metadata" not in dumped
    assert dumped["livemode"] is False


def test_attribute_docstrings_describe_fields():
    assert Customer.model_fields["email"].description == "The customer's e-mail address."


def test_optional_customer_accepts_partial_payload():
    partial = OptionalCustomer.model_validate({"id": "cus_123", "email": "juan@example.com"})
    assert partial.currency is None
    assert partial.model_dump() == {"id": "cus_123", "email": "juan@example.com"}


def test_billing_statement_embeds_optional_mirrors():
    statement = BillingStatement.model_validate({
        "id": "bstm_123",
        "customer_id": "cus_123",
        "status": "draft",
        "payment_settings": {"payment_methods": ["card", "gcash"]},
        "customer": {"id": "cus_123", "name": "Juan"},
        "payment_intent": {"id": "pi_123", "status": "awaiting_payment_method"},
        "amount": 2000,
        "currency": "PHP",
        "livemode": False,
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    })
    assert statement.customer.name == "Juan"
    assert statement.customer.email is None
    assert statement.payment_intent.client_secret is None


def test_payment_renamed_fields():
    payment = Payment.model_validate(payment_body())
    assert payment.payment_method.method_type == "card"
    assert payment.model_dump(mode="json", by_alias=True)["payment_method"]["type"] == "card"


def test_update_payment_builder():
    params = UpdatePayment.new().with_description("New description").with_metadata({"order_id": "order_238afec81"})
    assert params.model_dump() == {
        "metadata": {"order_id": "order_238afec81"},
        "description": "New description",
    }


def test_create_webhook_builder():
    params = CreateWebhook.new("https://example.com/hooks", [EventType.PAYMENT_INTENT_SUCCEEDED])
    assert params.description is None
    params.with_description("Order notifications")
    assert params.model_dump(mode="json") == {
        "url": "https://example.com/hooks",
        "events": ["payment_intent.succeeded"],
        "description": "Order notifications",
    }


def test_update_webhook_builder_starts_empty():
    params = UpdateWebhook.new()
    assert params.model_dump() == {}
    params.with_events([EventType.REFUND_CREATED]).with_url("https://example.com/new")
    assert params.model_dump(mode="json") == {
        "url": "https://example.com/new",
        "events": ["refund.created"],
    }


def test_webhook_list_params_default_pagination():
    assert WebhookListParams.new().list_params == ListParams()


def test_webhook_parses_event_types():
    webhook = Webhook.model_validate(webhook_body())
    assert webhook.events == [EventType.PAYMENT_INTENT_SUCCEEDED]


def test_event_type_parts():
    event_type = EventType("billing_statement.marked_uncollectible")
    assert event_type is EventType.BILLING_STATEMENT_MARKED_UNCOLLECTIBLE
    assert event_type.resource == "billing_statement"
    assert event_type.action == "marked_uncollectible"
    assert str(event_type) == "billing_statement.marked_uncollectible"


def test_event_type_alias():
    event = Event.model_validate({
        "id": "evt_123",
        "type": "refund.created",
        "data": {"id": "re_123"},
        "livemode": False,
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    })
    assert event.event_type is EventType.REFUND_CREATED
    assert event.model_dump(mode="json", by_alias=True)["type"] == "refund.created"


def test_deleted_response():
    deleted = Deleted[WebhookId].model_validate({"id": "wh_123", "deleted": True})
    assert deleted.id == "wh_123"
    assert deleted.deleted
