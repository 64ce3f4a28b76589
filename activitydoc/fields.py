# activitydoc/fields.py
"""
Type-directed access to open-tail fields.

Every entity keeps its statically known fields as attributes and everything
else in ``extra_fields``, a plain dict of decoded JSON values. Values are
converted between that generic form and a caller-chosen Python type on each
access:

    note = document.get_field("object", Object)
    note.get_field("content", str)
    note.set_field("sensitive", True)

Conversion is done by pydantic. Entity classes plug into it through
``__get_pydantic_core_schema__``, so they can be used as target types
anywhere pydantic accepts a type (``List[Object]``, dataclass fields, ...).
"""

import copy
import functools
import json
import logging
import math
from operator import methodcaller
from typing import Any, Callable, Dict, Optional, Tuple

from pydantic import TypeAdapter
from pydantic_core import SchemaSerializer, core_schema

from .errors import ConversionError, MissingFieldError, ParseError

logger = logging.getLogger(__name__)


def _type_name(as_type: Any) -> str:
    return getattr(as_type, "__name__", None) or repr(as_type)


@functools.lru_cache(maxsize=256)
def _adapter(as_type: Any) -> TypeAdapter:
    return TypeAdapter(as_type)


def json_value_schema(
    validate: Callable[[Any], Any],
    dump: Callable[[Any], Any],
) -> core_schema.CoreSchema:
    """
    Core schema for a class that reads and writes its own JSON form.

    Args:
        validate: Builds an instance from a decoded JSON value, raising
            ValueError when the value has the wrong shape
        dump: Returns the decoded JSON form of an instance
    """
    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(dump),
    )


def from_json_value(value: Any, as_type: Any = Any) -> Any:
    """
    Convert a decoded JSON value to ``as_type``.

    Validation is strict and follows JSON input rules: no string to number
    coercion, booleans are not integers, enums are read by value and
    dataclasses are read from objects (unknown members ignored).

    Args:
        value: A decoded JSON value (dict, list, str, int, float, bool, None)
        as_type: Any type pydantic can validate, including entity classes
            and unions of them (e.g. ObjectOrLink)

    Returns:
        A new value of the requested type. Never shares mutable state
        with ``value``.

    Raises:
        ConversionError: If the value does not have the requested shape
    """
    try:
        adapter = _adapter(as_type)
        return adapter.validate_json(json.dumps(value, allow_nan=False), strict=True)
    except (NameError, TypeError, ValueError) as exc:
        # ValidationError is a ValueError; schema errors are TypeError or NameError
        raise ConversionError(f"Cannot read {_type_name(as_type)}: {exc}") from exc


def to_json_value(value: Any) -> Any:
    """
    Convert a Python value to a decoded JSON value.

    Inverse of from_json_value(): sequences become lists, Enum members
    become their value, dataclasses and entities become objects.

    Raises:
        ConversionError: If the value has no JSON representation
    """
    if isinstance(value, type):
        raise ConversionError(f"Class {value.__name__} has no JSON representation")
    if isinstance(value, float) and not math.isfinite(value):
        raise ConversionError(f"{value!r} has no JSON representation")
    try:
        dumped = _adapter(type(value)).dump_python(value, mode="json", by_alias=True)
        json.dumps(dumped, allow_nan=False)
    except (NameError, TypeError, ValueError) as exc:
        raise ConversionError(f"{type(value).__name__} has no JSON representation: {exc}") from exc
    return dumped


# Parsing helpers shared by the entity classes

def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def decode_json(json_str: str, entity: str) -> Any:
    """Decode JSON text, raising ParseError on malformed input."""
    try:
        return json.loads(json_str, parse_constant=_reject_constant)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Invalid JSON for {entity}: {exc}") from exc


def expect_object(data: Any, entity: str) -> Dict[str, Any]:
    """Check that a decoded value is a JSON object and return a private copy."""
    if not isinstance(data, dict):
        raise ParseError(f"{entity} must be a JSON object, got {type(data).__name__}")
    return copy.deepcopy(data)


def take_field(
    data: Dict[str, Any],
    name: str,
    as_type: Any,
    entity: str,
    required: bool = True,
) -> Any:
    """
    Remove a known field from ``data`` and convert it.

    Raises:
        ParseError: If a required field is absent or the value does not
            convert to ``as_type``
    """
    if name not in data:
        if required:
            raise ParseError(f"{entity} is missing required field {name!r}")
        return None
    raw = data.pop(name)
    try:
        return from_json_value(raw, as_type)
    except ConversionError as exc:
        raise ParseError(f"{entity} field {name!r}: {exc}") from exc


class JsonEntityMixin:
    """
    JSON text (de)serialization for classes that define
    ``to_dict()`` and ``from_dict()``.

    Subclasses are also pydantic types: validated through ``from_dict()``
    and serialized through ``to_dict()``.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Used by pydantic for entities nested in untyped lists and dicts
        cls.__pydantic_serializer__ = SchemaSerializer(
            json_value_schema(cls._validate_json_value, methodcaller("to_dict"))
        )

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return json_value_schema(cls._validate_json_value, methodcaller("to_dict"))

    @classmethod
    def _validate_json_value(cls, value: Any):
        if isinstance(value, cls):
            return value
        return cls.from_dict(value)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON text."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str):
        """Deserialize from JSON text."""
        return cls.from_dict(decode_json(json_str, cls.__name__))


class ExtraFieldsMixin(JsonEntityMixin):
    """
    Accessors over an entity's ``extra_fields`` open tail.

    Subclasses list the wire names of their known fields in WIRE_NAMES.
    Open-tail members with those names are kept but never serialized.
    """

    WIRE_NAMES: Tuple[str, ...] = ()

    extra_fields: Dict[str, Any]

    def get_field(self, name: str, as_type: Any = Any) -> Any:
        """
        Read an open-tail field as ``as_type``.

        Returns None both when the field is absent and when its value
        does not convert. Use get_field_strict() to tell the two apart.
        """
        if name not in self.extra_fields:
            return None
        try:
            return from_json_value(self.extra_fields[name], as_type)
        except ConversionError as exc:
            logger.debug(f"Field {name!r} is not a {_type_name(as_type)}: {exc}")
            return None

    def get_field_strict(self, name: str, as_type: Any = Any) -> Any:
        """
        Read an open-tail field as ``as_type``.

        Raises:
            MissingFieldError: If the field is absent
            ConversionError: If the value does not convert
        """
        if name not in self.extra_fields:
            raise MissingFieldError(name)
        return from_json_value(self.extra_fields[name], as_type)

    def set_field(self, name: str, value: Any) -> None:
        """
        Insert or overwrite an open-tail field.

        Values without a JSON representation are ignored. Known fields are
        never touched, even when ``name`` is one of their wire names.
        """
        try:
            json_value = to_json_value(value)
        except ConversionError as exc:
            logger.debug(f"Ignoring set_field({name!r}): {exc}")
            return
        if name in self.WIRE_NAMES:
            logger.warning(
                f"Field {name!r} shadows a known {type(self).__name__} field "
                f"and will not be serialized"
            )
        self.extra_fields[name] = json_value

    def has_field(self, name: str) -> bool:
        """Check whether the open tail holds ``name``."""
        return name in self.extra_fields

    def remove_field(self, name: str) -> Any:
        """Remove an open-tail field, returning its raw JSON value (or None)."""
        return self.extra_fields.pop(name, None)

    def extract(self, as_type: Any) -> Any:
        """
        Read the whole open tail as a single ``as_type`` value.

        Returns None if the conversion fails.
        """
        try:
            return from_json_value(self.extra_fields, as_type)
        except ConversionError as exc:
            logger.debug(f"Cannot extract {_type_name(as_type)} from {type(self).__name__}: {exc}")
            return None

    def _merge_extra_fields(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Append the open tail to ``data``, skipping shadowed known fields."""
        for name, value in self.extra_fields.items():
            if name in self.WIRE_NAMES:
                continue
            data[name] = copy.deepcopy(value)
        return data
