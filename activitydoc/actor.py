# activitydoc/actor.py
"""
ActivityPub Actor view.

An Actor is a Document whose type is one of the actor types and which
carries an inbox and an outbox. Documents are parsed generically first and
promoted once their role is known:

    document = Document.from_json(text)
    actor = Actor.from_document(document)

The conversion is one-way. The actor has no context attribute, so the
document's @context is kept in the actor's open tail.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import ConversionError, ParseError
from .fields import ExtraFieldsMixin, expect_object, take_field
from .objects import Document
from .vocab import ActorType

logger = logging.getLogger(__name__)


@dataclass
class Actor(ExtraFieldsMixin):
    """
    An ActivityPub Actor.

    Attributes:
        type: Actor type (Person, Service, ...)
        inbox: Inbox URL
        outbox: Outbox URL
        extra_fields: Every other member, including @context after
            conversion from a Document
    """
    type: ActorType
    inbox: str
    outbox: str
    extra_fields: Dict[str, Any] = field(default_factory=dict)

    WIRE_NAMES = ("type", "inbox", "outbox")

    def __post_init__(self):
        if isinstance(self.type, str):
            self.type = ActorType(self.type)

    @property
    def id(self) -> Optional[str]:
        """Actor URI, if present."""
        return self.get_field("id", str)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a flat JSON object."""
        data = {
            "type": self.type.value,
            "inbox": self.inbox,
            "outbox": self.outbox,
        }
        return self._merge_extra_fields(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Actor":
        """Deserialize from a decoded JSON object."""
        data = expect_object(data, "Actor")
        actor_type = take_field(data, "type", ActorType, "Actor")
        inbox = take_field(data, "inbox", str, "Actor")
        outbox = take_field(data, "outbox", str, "Actor")
        return cls(type=actor_type, inbox=inbox, outbox=outbox, extra_fields=data)

    @classmethod
    def from_document(cls, document: Document) -> "Actor":
        """
        Promote a generic Document to an Actor.

        The document's id, type and open tail become the actor's fields;
        its @context is stored in the actor's open tail. The document is
        left unchanged.

        Raises:
            ConversionError: If type, inbox or outbox is missing or
                ill-typed, or type is not an actor type
        """
        try:
            actor = cls.from_dict(document.object.to_dict())
        except ParseError as exc:
            raise ConversionError(f"Document is not an Actor: {exc}") from exc

        actor.extra_fields["@context"] = document.context.to_json_value()
        logger.debug(f"Converted {document.type.value} document {document.id} to Actor")
        return actor


def to_actor(document: Document) -> Actor:
    """Promote a generic Document to an Actor, see Actor.from_document()."""
    return Actor.from_document(document)
