# Code generated by scripts/generate_models.py from customers.yaml. DO NOT EDIT.
"""Customer models."""
from typing import Annotated, Optional

from pydantic import Field

from payrex.types.base import Flatten, OmitIfNone, PayrexModel
from payrex.types.common import Currency, Metadata, Timestamp
from payrex.types.ids import CustomerId
from payrex.types.pagination import ListParams


class Customer(PayrexModel):
    """A Customer resource represents the customer of your business. A customer could be a person or a
    company. Use this resource to track payments that belong to the same customer.
    """

    id: CustomerId
    """Unique identifier for the resource. The prefix is `cus_`."""

    billing_statement_prefix: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's prefix used to generate unique billing statement numbers."""

    email: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's e-mail address."""

    name: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's name."""

    next_billing_statement_sequence_number: Annotated[Optional[str], OmitIfNone()] = None
    """The suffix of the customer's next billing statement number, e.g. 0001."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    livemode: bool
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Timestamp
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Timestamp
    """The time the resource was updated and measured in seconds since the Unix epoch."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""


class OptionalCustomer(PayrexModel):
    """Optional variant for Customer. This is only used for responses in billing statements API."""

    id: Annotated[Optional[CustomerId], OmitIfNone()] = None
    """Unique identifier for the resource. The prefix is `cus_`."""

    billing_statement_prefix: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's prefix used to generate unique billing statement numbers."""

    email: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's e-mail address."""

    name: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's name."""

    next_billing_statement_sequence_number: Annotated[Optional[str], OmitIfNone()] = None
    """The suffix of the customer's next billing statement number, e.g. 0001."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    livemode: Annotated[Optional[bool], OmitIfNone()] = None
    """The value is `true` if the resource's mode is live or the value is `false` if the resource is in test mode."""

    created_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time the resource was created and measured in seconds since the Unix epoch."""

    updated_at: Annotated[Optional[Timestamp], OmitIfNone()] = None
    """The time the resource was updated and measured in seconds since the Unix epoch."""

    currency: Annotated[Optional[Currency], OmitIfNone()] = None
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""


class CreateCustomer(PayrexModel):
    """Query parameters when creating a customer."""

    email: str
    """The customer's e-mail address."""

    name: str
    """The customer's name."""

    billing_statement_prefix: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's prefix used to generate unique billing statement numbers. Allows 3-15 uppercase letters or numbers."""

    next_billing_statement_sequence_number: Annotated[Optional[str], OmitIfNone()] = None
    """The sequence number used as a suffix when creating the customer's next billing statement number. Defaults to 1."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    currency: Currency
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""

    @classmethod
    def new(cls, email: object, name: object, currency: Currency) -> "CreateCustomer":
        """Creates a new `CreateCustomer` instance."""
        return cls(email=str(email), name=str(name), currency=currency)

    def with_billing_statement_prefix(self, billing_statement_prefix: object) -> "CreateCustomer":
        """Sets the billing statement prefix in the query params when creating a customer."""
        self.billing_statement_prefix = str(billing_statement_prefix)
        return self

    def with_next_billing_statement_sequence_number(self, next_billing_statement_sequence_number: object) -> "CreateCustomer":
        """Sets the next billing statement sequence number in the query params when creating a customer."""
        self.next_billing_statement_sequence_number = str(next_billing_statement_sequence_number)
        return self

    def with_metadata(self, metadata: Metadata) -> "CreateCustomer":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self


class UpdateCustomer(PayrexModel):
    """Query parameters when updating a customer."""

    billing_statement_prefix: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's prefix used to generate unique billing statement numbers. Allows 3-15 uppercase letters or numbers."""

    next_billing_statement_sequence_number: Annotated[Optional[str], OmitIfNone()] = None
    """The sequence number used as a suffix when creating the customer's next billing statement number. Defaults to 1."""

    email: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's e-mail address."""

    name: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's name."""

    currency: Annotated[Optional[Currency], OmitIfNone()] = None
    """A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    @classmethod
    def new(cls) -> "UpdateCustomer":
        """Creates a new `UpdateCustomer` instance."""
        return cls()

    def with_billing_statement_prefix(self, billing_statement_prefix: object) -> "UpdateCustomer":
        """Sets the billing statement prefix in the query params when updating a customer."""
        self.billing_statement_prefix = str(billing_statement_prefix)
        return self

    def with_next_billing_statement_sequence_number(self, next_billing_statement_sequence_number: object) -> "UpdateCustomer":
        """Sets the next billing statement sequence number in the query params when updating a customer."""
        self.next_billing_statement_sequence_number = str(next_billing_statement_sequence_number)
        return self

    def with_email(self, email: object) -> "UpdateCustomer":
        """Sets the email in query params when updating a customer."""
        self.email = str(email)
        return self

    def with_name(self, name: object) -> "UpdateCustomer":
        """Sets the name in query params when updating a customer."""
        self.name = str(name)
        return self

    def with_currency(self, currency: Currency) -> "UpdateCustomer":
        """Sets the currency in the query parameters."""
        self.currency = currency
        return self

    def with_metadata(self, metadata: Metadata) -> "UpdateCustomer":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self


class CustomerListParams(PayrexModel):
    """Query parameters when listing customers."""

    list_params: Annotated[ListParams, Flatten()] = Field(default_factory=ListParams)
    """Baseline pagination fields such as `limit`, `before`, and `after`."""

    email: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's e-mail address."""

    name: Annotated[Optional[str], OmitIfNone()] = None
    """The customer's name."""

    metadata: Annotated[Optional[Metadata], OmitIfNone()] = None
    """A set of key-value pairs attached to the Payment. This is useful for storing additional information about the Payment."""

    @classmethod
    def new(cls) -> "CustomerListParams":
        """Creates a new `CustomerListParams` instance."""
        return cls()

    def with_email(self, email: object) -> "CustomerListParams":
        """Sets the email in query params when listing customers."""
        self.email = str(email)
        return self

    def with_name(self, name: object) -> "CustomerListParams":
        """Sets the name in query params when listing customers."""
        self.name = str(name)
        return self

    def with_metadata(self, metadata: Metadata) -> "CustomerListParams":
        """Sets metadata in the query parameters."""
        self.metadata = metadata
        return self
