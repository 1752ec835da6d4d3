"""Canonical field expansion for annotated structs."""
import dataclasses
import logging
from types import MappingProxyType
from typing import List, Sequence, Tuple

from payrex.codegen.errors import SchemaError
from payrex.codegen.types import (
    AnnotationOptions,
    ExpandedStruct,
    FieldSpec,
    StructSpec,
    TypeRef,
)
from payrex.codegen.utils import wrap_optional

log = logging.getLogger(__name__)


DESCRIPTION_TEMPLATES = MappingProxyType({
    "refund": "An arbitrary string attached to the Refund.",
    "payment": (
        "An arbitrary string attached to the Payment. Useful reference when viewing "
        "Payment from [PayRex Dashboard](https://dashboard.payrexhq.com)."
    ),
    "payment_intent": (
        "An arbitrary string attached to the Payment Intent. Useful reference when "
        "viewing paid payments from the [PayRex Dashboard](https://dashboard.payrexhq.com)."
    ),
    "webhook": (
        "An arbitrary string attached to the Webhook. You can use this to give more "
        "information about the Webhook resource."
    ),
    "checkout_session": (
        "An arbitrary string attached to the CheckoutSession. Useful reference when "
        "viewing paid Payment from PayRex Dashboard."
    ),
    "billing_statements": (
        "An arbitrary string attached to the billing statement and copied over to its "
        "payment intent. This is a useful reference when viewing the payment resources "
        "associated with the billing statement from the PayRex Dashboard.\n"
        "\n"
        "If the description is not modified, the default value is "
        "\"Payment for Billing Statement <billing statement number>\""
    ),
    "billing_statement_line_items": (
        "The description attribute describes the line item of the billing statement. "
        "It could be a product you sell or a service you provide to your customers."
    ),
})

SETTER_DESCRIPTIONS = MappingProxyType({
    "metadata": "Sets metadata in the query parameters.",
    "description": "Sets the description in the query parameters.",
    "currency": "Sets the currency in the query parameters.",
    "amount": "Sets the amount in the query parameters.",
})

AMOUNT_DOC = (
    "The amount of the payment to be transferred to your PayRex merchant account. This is a "
    "positive integer that your customer paid in the smallest currency unit, cents. If the "
    "customer paid ₱ 120.50, the amount of the Payment should be 12050.\n"
    "\n"
    "The minimum amount is ₱ 20 (2000 in cents) and the maximum amount is ₱ 59,999,999.99 "
    "(5999999999 in cents)."
)
METADATA_DOC = (
    "A set of key-value pairs attached to the Payment. This is useful for storing additional "
    "information about the Payment."
)
LIVEMODE_DOC = (
    "The value is `true` if the resource's mode is live or the value is `false` if the "
    "resource is in test mode."
)
CREATED_AT_DOC = "The time the resource was created and measured in seconds since the Unix epoch."
UPDATED_AT_DOC = "The time the resource was updated and measured in seconds since the Unix epoch."
CURRENCY_DOC = "A three-letter ISO currency code in uppercase. As of the moment, we only support PHP."


def description_doc(key: str, struct_name: str = "") -> str:
    """Resolve the doc template for a ``description`` switch value.

    Unknown keys resolve to an empty string and are reported as a warning.
    """
    docs = DESCRIPTION_TEMPLATES.get(key)
    if docs is None:
        log.warning(
            "Unrecognized description key %r on struct %r; emitting empty doc",
            key, struct_name or "-",
        )
        return ""
    return docs


def canonical_fields(options: AnnotationOptions, struct_name: str = "") -> List[FieldSpec]:
    """Build the canonical fields selected by `options`, in layout order."""
    fields = []
    if options.amount:
        fields.append(FieldSpec(name="amount", type=TypeRef("int"), doc=AMOUNT_DOC))
    if options.metadata:
        fields.append(FieldSpec(
            name="metadata",
            type=TypeRef("Optional", (TypeRef("Metadata"),)),
            doc=METADATA_DOC,
            description=SETTER_DESCRIPTIONS["metadata"],
            omit_if_none=True,
        ))
    if options.description is not None:
        fields.append(FieldSpec(
            name="description",
            type=TypeRef("Optional", (TypeRef("str"),)),
            doc=description_doc(options.description, struct_name),
            description=SETTER_DESCRIPTIONS["description"],
            omit_if_none=True,
        ))
    if options.livemode:
        fields.append(FieldSpec(name="livemode", type=TypeRef("bool"), doc=LIVEMODE_DOC))
    if options.timestamp:
        fields.append(FieldSpec(name="created_at", type=TypeRef("Timestamp"), doc=CREATED_AT_DOC))
        fields.append(FieldSpec(name="updated_at", type=TypeRef("Timestamp"), doc=UPDATED_AT_DOC))
    if options.currency:
        fields.append(FieldSpec(name="currency", type=TypeRef("Currency"), doc=CURRENCY_DOC))
    return fields


def attach_setter_descriptions(fields: Sequence[FieldSpec]) -> Tuple[FieldSpec, ...]:
    """Give optional fields named after a canonical switch their fixed setter doc."""
    attached = []
    for spec in fields:
        if spec.name in SETTER_DESCRIPTIONS and spec.is_optional:
            spec = dataclasses.replace(spec, description=SETTER_DESCRIPTIONS[spec.name])
        attached.append(spec)
    return tuple(attached)


def expand_fields(
    fields: Sequence[FieldSpec],
    options: AnnotationOptions,
    struct_name: str = "",
) -> Tuple[FieldSpec, ...]:
    """
    Append the canonical fields selected by `options` to a field list.

    Args:
        fields: Declared fields, in declaration order
        options: Switches attached to the struct
        struct_name: Used in diagnostics only

    Returns:
        New field tuple: declared fields followed by canonical fields

    Raises:
        SchemaError: If a declared field has the name of an appended canonical field
    """
    canonical = canonical_fields(options, struct_name)
    declared = {spec.name for spec in fields}
    for spec in canonical:
        if spec.name in declared:
            raise SchemaError(
                f"Struct '{struct_name}': declared field '{spec.name}' clashes with "
                f"the canonical '{spec.name}' field added by its options"
            )
    return attach_setter_descriptions(list(fields) + canonical)


def build_optional_mirror(name: str, fields: Sequence[FieldSpec]) -> StructSpec:
    """Build the ``Optional<Name>`` mirror where every field may be absent."""
    mirror_fields = tuple(
        FieldSpec(
            name=spec.name,
            type=wrap_optional(spec.type),
            doc=spec.doc,
            omit_if_none=True,
            rename=spec.rename,
            flatten=spec.flatten,
        )
        for spec in fields
    )
    return StructSpec(
        name=f"Optional{name}",
        doc=f"Optional variant for {name}. This is only used for responses in billing statements API.",
        fields=mirror_fields,
    )


def expand_struct(struct: StructSpec) -> ExpandedStruct:
    """Run canonical field expansion on a struct and build its mirror if requested."""
    fields = expand_fields(struct.fields, struct.options, struct.name)
    mirror = build_optional_mirror(struct.name, fields) if struct.options.optional else None
    return ExpandedStruct(
        name=struct.name,
        doc=struct.doc,
        fields=fields,
        builder=struct.builder,
        mirror=mirror,
    )
