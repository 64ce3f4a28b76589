# activitydoc/objects.py
"""
ActivityStreams objects, links and the top-level JSON-LD document.

Each entity holds its known fields as dataclass attributes and every other
member in ``extra_fields``. On the wire both parts form one flat JSON object.
"""

import logging
from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, Optional, Union

from pydantic import Field

from .context import Context, DEFAULT_CONTEXT
from .errors import ConversionError, ParseError
from .fields import (
    ExtraFieldsMixin,
    JsonEntityMixin,
    expect_object,
    from_json_value,
    take_field,
)
from .vocab import LinkType, ObjectType

logger = logging.getLogger(__name__)


@dataclass
class Object(ExtraFieldsMixin):
    """
    A general ActivityStreams object.

    Attributes:
        type: Object type (Note, Create, Person, ...)
        id: Object URI, omitted from output when None
        extra_fields: Every other member, as decoded JSON
    """
    type: ObjectType
    id: Optional[str] = None
    extra_fields: Dict[str, Any] = field(default_factory=dict)

    WIRE_NAMES = ("id", "type")

    def __post_init__(self):
        if isinstance(self.type, str):
            self.type = ObjectType(self.type)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a flat JSON object."""
        data = {}
        if self.id is not None:
            data["id"] = self.id
        data["type"] = self.type.value
        return self._merge_extra_fields(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Object":
        """Deserialize from a decoded JSON object."""
        data = expect_object(data, "Object")
        object_type = take_field(data, "type", ObjectType, "Object")
        object_id = take_field(data, "id", Optional[str], "Object", required=False)
        return cls(type=object_type, id=object_id, extra_fields=data)


@dataclass
class Link(ExtraFieldsMixin):
    """
    An indirect, qualified reference to a resource.

    Attributes:
        type: Link or Mention
        href: Target URI
        id: Link URI, omitted from output when None
        extra_fields: Every other member, as decoded JSON
    """
    type: LinkType
    href: str
    id: Optional[str] = None
    extra_fields: Dict[str, Any] = field(default_factory=dict)

    WIRE_NAMES = ("type", "id", "href")

    def __post_init__(self):
        if isinstance(self.type, str):
            self.type = LinkType(self.type)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a flat JSON object."""
        data = {"type": self.type.value}
        if self.id is not None:
            data["id"] = self.id
        data["href"] = self.href
        return self._merge_extra_fields(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Link":
        """Deserialize from a decoded JSON object."""
        data = expect_object(data, "Link")
        link_type = take_field(data, "type", LinkType, "Link")
        link_id = take_field(data, "id", Optional[str], "Link", required=False)
        href = take_field(data, "href", str, "Link")
        return cls(type=link_type, href=href, id=link_id, extra_fields=data)


# Alternatives are tried in this order: a value that parses as an Object is
# never read as a Link.
ObjectOrLink = Annotated[Union[Object, Link], Field(union_mode="left_to_right")]


def parse_object_or_link(data: Any) -> Union[Object, Link]:
    """
    Parse a decoded JSON value as an Object, falling back to a Link.

    Raises:
        ParseError: If the value is neither
    """
    try:
        return Object.from_dict(data)
    except ParseError as exc:
        logger.debug(f"Not an Object ({exc}), trying Link")
    try:
        return Link.from_dict(data)
    except ParseError as exc:
        raise ParseError(f"Value is neither an Object nor a Link: {exc}") from exc


@dataclass
class Document(JsonEntityMixin):
    """
    A top-level JSON-LD document: a context plus an Object.

    The object's fields sit next to ``@context`` in the same JSON object.
    Field accessors delegate to the object's open tail.

    Attributes:
        object: The described Object
        context: The @context value
    """
    object: Object
    context: Context = DEFAULT_CONTEXT

    @property
    def type(self) -> ObjectType:
        return self.object.type

    @property
    def id(self) -> Optional[str]:
        return self.object.id

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a flat JSON-LD object."""
        data = {"@context": self.context.to_json_value()}
        for name, value in self.object.to_dict().items():
            if name == "@context":
                continue
            data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """Deserialize from a decoded JSON-LD object."""
        data = expect_object(data, "Document")
        context = take_field(data, "@context", Context, "Document")
        return cls(object=Object.from_dict(data), context=context)

    def get_field(self, name: str, as_type: Any = Any) -> Any:
        """Read an open-tail field of the object, see ExtraFieldsMixin.get_field()."""
        return self.object.get_field(name, as_type)

    def get_field_strict(self, name: str, as_type: Any = Any) -> Any:
        """Read an open-tail field of the object or raise, see ExtraFieldsMixin.get_field_strict()."""
        return self.object.get_field_strict(name, as_type)

    def set_field(self, name: str, value: Any) -> None:
        """Insert or overwrite an open-tail field of the object."""
        if name == "@context":
            logger.warning("Field '@context' shadows Document.context and will not be serialized")
        self.object.set_field(name, value)

    def has_field(self, name: str) -> bool:
        """Check whether the object's open tail holds ``name``."""
        return self.object.has_field(name)

    def remove_field(self, name: str) -> Any:
        """Remove an open-tail field of the object, returning its raw JSON value."""
        return self.object.remove_field(name)

    def extract(self, as_type: Any) -> Any:
        """
        Read the whole document as a single ``as_type`` value.

        Unlike Object.extract(), ``@context``, ``id`` and ``type`` are
        included. Returns None if the conversion fails.
        """
        try:
            return from_json_value(self.to_dict(), as_type)
        except ConversionError as exc:
            logger.debug(f"Cannot extract {as_type!r} from Document: {exc}")
            return None
