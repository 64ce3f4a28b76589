# activitydoc - ActivityStreams / ActivityPub JSON-LD document model
#
# Entities keep a fixed set of strongly typed fields and preserve every
# other JSON member losslessly in an open tail.
#
# Core concepts:
# - Context: The opaque JSON-LD @context string
# - Object / Link: ActivityStreams nodes with typed id/type/href fields
# - Document: A Context plus an Object, flattened into one JSON object
# - Field accessors: get_field/set_field/extract read and write the open
#   tail as caller-chosen Python types
# - Actor: A typed view promoted from a Document

from .errors import DocumentError, ParseError, ConversionError, MissingFieldError
from .context import Context, AS_NAMESPACE, DEFAULT_CONTEXT
from .vocab import ObjectType, LinkType, ActorType
from .fields import from_json_value, to_json_value
from .objects import Object, Link, ObjectOrLink, Document, parse_object_or_link
from .actor import Actor, to_actor

__all__ = [
    # Errors
    "DocumentError",
    "ParseError",
    "ConversionError",
    "MissingFieldError",
    # Context
    "Context",
    "AS_NAMESPACE",
    "DEFAULT_CONTEXT",
    # Vocabulary
    "ObjectType",
    "LinkType",
    "ActorType",
    # Conversion
    "from_json_value",
    "to_json_value",
    # Entities
    "Object",
    "Link",
    "ObjectOrLink",
    "Document",
    "parse_object_or_link",
    "Actor",
    "to_actor",
]

__version__ = "0.1.0"
