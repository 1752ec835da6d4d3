# Code generated by scripts/generate_models.py from webhooks.yaml. DO NOT EDIT.
"""Webhook models."""
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import Field

from payrex.types.base import Flatten, OmitIfNone, PayrexModel
from payrex.types.common import Timestamp
from payrex.types.event import EventType
from payrex.types.ids import WebhookId
from payrex.types.pagination import ListParams


class WebhookStatus(str, Enum):
    """The latest status of a Webhook."""

    ENABLED = "enabled"
    """Webhook is enabled."""
    DISABLED = "disabled"
    """Webhook is disabled."""


class Webhook(PayrexModel):
    """A Webhook resource is used to notify your application about events in your PayRex account."""

    id: WebhookId
    """Unique identifier for the resource. The prefix is `wh_`."""

    secret_key: Annotated[Optional[str], OmitIfNone()] = None
    """The secret key used for webhook signature verification."""

    status: WebhookStatus
    """The latest status of the Webhook. A disabled webhook stops sending events."""

    url: str
    """The URL where the webhook will send the event."""

    events: List[EventType]
    """The list of events the webhook will listen to."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Webhook. You can use this to give more information about the Webhook resource."""

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""


class CreateWebhook(PayrexModel):
    """Query parameters when creating a webhook."""

    url: str
    """The URL where PayRex will send the event that happened from your account. The URL must use HTTPS."""

    events: List[EventType]
    """The list of events the webhook will listen to."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Webhook. You can use this to give more information about the Webhook resource."""

    @classmethod
    def new(cls, url: object, events: List[EventType]) -> "CreateWebhook":
        """Creates a new `CreateWebhook` instance."""
        return cls(url=str(url), events=events)

    def with_description(self, description: object) -> "CreateWebhook":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self


class UpdateWebhook(PayrexModel):
    """Query parameters when updating a webhook."""

    url: Annotated[Optional[str], OmitIfNone()] = None
    """The URL where the webhook will send the event. The URL must use HTTPS."""

    events: Annotated[Optional[List[EventType]], OmitIfNone()] = None
    """The list of events the webhook will listen to."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Webhook. You can use this to give more information about the Webhook resource."""

    @classmethod
    def new(cls) -> "UpdateWebhook":
        """Creates a new `UpdateWebhook` instance."""
        return cls()

    def with_url(self, url: object) -> "UpdateWebhook":
        """Sets the URL in the query params when updating a webhook."""
        self.url = str(url)
        return self

    def with_events(self, events: List[EventType]) -> "UpdateWebhook":
        """Sets the list of events in the query params when updating a webhook. Note that this overrides existing events to listen to in the webhook."""
        self.events = events
        return self

    def with_description(self, description: object) -> "UpdateWebhook":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self


class WebhookListParams(PayrexModel):
    """Query parameters when listing webhook resources."""

    list_params: Annotated[ListParams, Flatten()] = Field(default_factory=ListParams)
    """Baseline pagination fields such as `limit`, `before`, and `after`."""

    url: Annotated[Optional[str], OmitIfNone()] = None
    """Search webhooks by `url`."""

    description: Annotated[Optional[str], OmitIfNone()] = None
    """An arbitrary string attached to the Webhook. You can use this to give more information about the Webhook resource."""

    @classmethod
    def new(cls) -> "WebhookListParams":
        """Creates a new `WebhookListParams` instance."""
        return cls()

    def with_url(self, url: object) -> "WebhookListParams":
        """Sets the URL in the query params when listing webhooks."""
        self.url = str(url)
        return self

    def with_description(self, description: object) -> "WebhookListParams":
        """Sets the description in the query parameters."""
        self.description = str(description)
        return self
