# activitydoc/context.py
"""
The JSON-LD @context value.

Only the single-string form is supported. The value is opaque: it is never
resolved against a vocabulary. Arrays and embedded context objects are
rejected rather than guessed at.
"""

from dataclasses import dataclass
from operator import methodcaller
from typing import Any

from pydantic_core import SchemaSerializer, core_schema

from .errors import ParseError
from .fields import json_value_schema

AS_NAMESPACE = "https://www.w3.org/ns/activitystreams"


@dataclass(frozen=True)
class Context:
    """
    A JSON-LD context.

    Attributes:
        uri: The context string, usually the ActivityStreams namespace
    """
    uri: str

    @classmethod
    def default(cls) -> "Context":
        """The ActivityStreams context."""
        return DEFAULT_CONTEXT

    def to_json_value(self) -> str:
        """Wire form of the context."""
        return self.uri

    @classmethod
    def from_json_value(cls, value) -> "Context":
        """Parse a decoded @context value."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ParseError(
                f"Unsupported @context shape: {type(value).__name__}"
            )
        return cls(uri=value)

    def __str__(self) -> str:
        return self.uri

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return json_value_schema(cls.from_json_value, methodcaller("to_json_value"))


DEFAULT_CONTEXT = Context(AS_NAMESPACE)

Context.__pydantic_serializer__ = SchemaSerializer(
    json_value_schema(Context.from_json_value, methodcaller("to_json_value"))
)
