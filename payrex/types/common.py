"""Types shared across resources."""
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, Generic, List, Optional, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from payrex.types.base import OmitIfNone, PayrexModel

Metadata = Dict[str, str]
"""Key-value pairs attached to a resource."""

IdT = TypeVar("IdT")


class Timestamp(int):
    """Seconds since the Unix epoch."""

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )

    @classmethod
    def from_unix(cls, seconds: int) -> "Timestamp":
        return cls(seconds)

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(int(self), tz=timezone.utc)


class Currency(str, Enum):
    """Three-letter ISO currency code. Only PHP is supported."""

    PHP = "PHP"


class PaymentMethod(str, Enum):
    """Payment methods accepted by PayRex."""

    CARD = "card"
    GCASH = "gcash"
    MAYA = "maya"
    QRPH = "qrph"


class CaptureMethod(str, Enum):
    """How a card payment is captured. ``manual`` enables hold then capture."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"


class CardOptions(PayrexModel):
    """Options that modify how card payments are processed."""

    capture_type: Annotated[Optional[CaptureMethod], OmitIfNone()] = None
    """Describes the capture type of a card payment: `automatic` or `manual`."""

    allowed_bins: Annotated[Optional[List[str]], OmitIfNone()] = None
    """Restricts accepted cards to the listed BINs."""

    allowed_funding: Annotated[Optional[List[str]], OmitIfNone()] = None
    """Restricts accepted cards to the listed funding types, e.g. `credit` or `debit`."""


class PaymentMethodOptions(PayrexModel):
    """Key-value pairs that modify the behavior of a payment method."""

    card: Annotated[Optional[CardOptions], OmitIfNone()] = None


class Deleted(PayrexModel, Generic[IdT]):
    """Response of a delete endpoint."""

    id: IdT
    """The ID of the deleted resource."""

    deleted: bool = True
    """`true` if the resource was deleted."""

    object: Annotated[Optional[str], OmitIfNone()] = None
