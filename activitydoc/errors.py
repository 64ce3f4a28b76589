# activitydoc/errors.py
"""
Exceptions raised by the document model.

ParseError and ConversionError are terminal for the operation that raised
them. The silent accessors (get_field, extract) catch DocumentError and
return None instead.
"""


class DocumentError(ValueError):
    """Base class for all activitydoc errors."""


class ParseError(DocumentError):
    """JSON text or tree does not match an entity's required shape."""


class ConversionError(DocumentError):
    """A value could not be converted to the requested type."""


class MissingFieldError(DocumentError):
    """A field looked up with a strict accessor is not present."""

    def __init__(self, name: str):
        super().__init__(f"Field {name!r} not present")
        self.name = name
