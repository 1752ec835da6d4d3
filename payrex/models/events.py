# Code generated by scripts/generate_models.py from events.yaml. DO NOT EDIT.
"""Event models."""
from typing import Annotated, Any, Optional

from pydantic import Field

from payrex.types.base import OmitIfNone, PayrexModel
from payrex.types.common import Timestamp
from payrex.types.event import EventType
from payrex.types.ids import EventId


class Event(PayrexModel):
    """An Event resource represents updates in your PayRex account triggered either by API calls or
    your actions from the Dashboard.
    """

    id: EventId
    """Unique identifier for the resource. The prefix is `evt_`."""

    data: Any
    """The resource associated with the event, and the previous values if the event is a resource update."""

    event_type: EventType = Field(alias="type")
    """The type of the event."""

    pending_webhooks: Annotated[Optional[int], OmitIfNone()] = None
    """The number of webhooks that haven't been successfully delivered for the Event."""

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""
