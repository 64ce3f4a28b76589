# tests/test_context.py
"""Tests for the JSON-LD context value."""

import dataclasses

import pytest

from activitydoc import AS_NAMESPACE, DEFAULT_CONTEXT, Context, Document, ParseError


class TestContext:
    """Test Context parsing and defaults."""

    def test_default_is_activitystreams(self):
        """Default context is the ActivityStreams namespace."""
        assert DEFAULT_CONTEXT.uri == "https://www.w3.org/ns/activitystreams"
        assert AS_NAMESPACE == DEFAULT_CONTEXT.uri
        assert Context.default() is DEFAULT_CONTEXT

    def test_from_string(self):
        """A string context is kept verbatim."""
        context = Context.from_json_value("https://example.com/ns")
        assert context == Context("https://example.com/ns")
        assert context.to_json_value() == "https://example.com/ns"
        assert str(context) == "https://example.com/ns"

    @pytest.mark.parametrize("value", [
        ["https://www.w3.org/ns/activitystreams", "https://w3id.org/security/v1"],
        {"@vocab": "https://www.w3.org/ns/activitystreams"},
        None,
        42,
    ])
    def test_other_shapes_rejected(self, value):
        """Non-string contexts fail closed."""
        with pytest.raises(ParseError):
            Context.from_json_value(value)

    def test_document_with_array_context(self):
        """A document with an array context does not parse."""
        text = '{"@context": ["https://www.w3.org/ns/activitystreams"], "type": "Note"}'
        with pytest.raises(ParseError, match="@context"):
            Document.from_json(text)

    def test_immutable(self):
        """Contexts cannot be modified after creation."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONTEXT.uri = "https://example.com/ns"
