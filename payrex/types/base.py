"""Base model shared by every request and response type."""
from typing import Any, Dict

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)


class OmitIfNone:
    """Field marker: leave the key out of dumps when the value is None."""

    def __repr__(self) -> str:
        return "OmitIfNone()"


class Flatten:
    """Field marker: merge a nested model's keys into the parent on the wire."""

    def __repr__(self) -> str:
        return "Flatten()"


def _has_marker(field_info, marker: type) -> bool:
    return any(isinstance(item, marker) for item in field_info.metadata)


class PayrexModel(BaseModel):
    """
    Base class for PayRex API models.

    Field annotations may carry ``OmitIfNone()`` and ``Flatten()`` markers;
    both are honoured by ``model_dump``/``model_dump_json``.
    """

    model_config = ConfigDict(populate_by_name=True, use_attribute_docstrings=True)

    @model_validator(mode="before")
    @classmethod
    def _collect_flattened(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for name, field_info in cls.model_fields.items():
            if not _has_marker(field_info, Flatten) or name in data:
                continue
            nested_cls = field_info.annotation
            if not (isinstance(nested_cls, type) and issubclass(nested_cls, BaseModel)):
                continue
            nested_keys = set(nested_cls.model_fields)
            nested = {key: value for key, value in data.items() if key in nested_keys}
            if nested:
                data = {key: value for key, value in data.items() if key not in nested_keys}
                data[name] = nested
        return data

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Dict[str, Any]:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, field_info in type(self).model_fields.items():
            key = name
            if info.by_alias and field_info.alias:
                key = field_info.alias
            if key not in data:
                continue
            if _has_marker(field_info, OmitIfNone) and data[key] is None:
                del data[key]
            elif _has_marker(field_info, Flatten):
                nested = data.pop(key)
                if isinstance(nested, dict):
                    for nested_key, value in nested.items():
                        data.setdefault(nested_key, value)
        return data
