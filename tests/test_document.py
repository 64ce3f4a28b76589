# tests/test_document.py
"""Tests for the top-level JSON-LD document."""

import json
import logging
from dataclasses import dataclass, field
from typing import Annotated, List

import pytest
from pydantic import Field

from activitydoc import (
    DEFAULT_CONTEXT,
    Context,
    Document,
    Link,
    Object,
    ObjectOrLink,
    ObjectType,
    ParseError,
)

# Example 1 of the ActivityPub specification
EXAMPLE_1 = """{
  "@context": "https://www.w3.org/ns/activitystreams",
  "type": "Person",
  "id": "https://social.example/alyssa/",
  "name": "Alyssa P. Hacker",
  "preferredUsername": "alyssa",
  "summary": "Lisp enthusiast hailing from MIT",
  "inbox": "https://social.example/alyssa/inbox/",
  "outbox": "https://social.example/alyssa/outbox/",
  "followers": "https://social.example/alyssa/followers/",
  "following": "https://social.example/alyssa/following/",
  "liked": "https://social.example/alyssa/liked/"
}"""

# Example 16 of the ActivityStreams vocabulary
EXAMPLE_16 = """{
  "@context": "https://www.w3.org/ns/activitystreams",
  "type": "Create",
  "id": "https://example.net/~mallory/87374",
  "actor": "https://example.net/~mallory",
  "object": {
    "id": "https://example.com/~mallory/note/72",
    "type": "Note",
    "attributedTo": "https://example.net/~mallory",
    "content": "This is a note",
    "published": "2015-02-10T15:04:55Z",
    "to": ["https://example.org/~john/"],
    "cc": ["https://example.com/~erik/followers",
           "https://www.w3.org/ns/activitystreams#Public"]
  },
  "published": "2015-02-10T15:04:55Z",
  "to": ["https://example.org/~john/"],
  "cc": ["https://example.com/~erik/followers",
         "https://www.w3.org/ns/activitystreams#Public"]
}"""


@pytest.fixture
def example_1() -> str:
    """Person actor document."""
    return EXAMPLE_1


@pytest.fixture
def example_16() -> str:
    """Create activity wrapping a Note."""
    return EXAMPLE_16


class TestDocumentParse:
    """Test parsing and serializing documents."""

    def test_parse_example_1(self, example_1):
        """A Person document parses with typed fields."""
        document = Document.from_json(example_1)
        assert document.context == DEFAULT_CONTEXT
        assert document.type == ObjectType.PERSON
        assert document.id == "https://social.example/alyssa/"
        assert document.get_field("preferredUsername", str) == "alyssa"

    def test_roundtrip(self, example_1):
        """Serialize then parse gives an equal document."""
        document = Document.from_json(example_1)
        restored = Document.from_json(document.to_json())
        assert restored == document

    def test_roundtrip_json_equal(self, example_16):
        """Serialized output equals the input as JSON."""
        document = Document.from_json(example_16)
        assert json.loads(document.to_json(indent=2)) == json.loads(example_16)

    def test_context_first(self, example_16):
        """@context leads the serialized object."""
        document = Document.from_json(example_16)
        assert list(document.to_dict())[:3] == ["@context", "id", "type"]

    def test_missing_context(self):
        """@context is required."""
        with pytest.raises(ParseError, match="@context"):
            Document.from_json('{"type": "Note"}')

    def test_missing_type(self):
        """type is required."""
        with pytest.raises(ParseError, match="type"):
            Document.from_json('{"@context": "https://www.w3.org/ns/activitystreams"}')

    def test_bad_type(self):
        """type outside the vocabulary does not parse."""
        with pytest.raises(ParseError):
            Document.from_json(
                '{"@context": "https://www.w3.org/ns/activitystreams", "type": "Blog"}'
            )

    def test_invalid_json(self):
        """Malformed JSON does not parse."""
        with pytest.raises(ParseError):
            Document.from_json("{")

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_number(self, constant):
        """NaN and Infinity are not JSON numbers."""
        with pytest.raises(ParseError):
            Document.from_json(
                '{"@context": "https://www.w3.org/ns/activitystreams", '
                f'"type": "Note", "likes": {constant}}}'
            )

    def test_top_level_array(self):
        """A JSON array is not a document."""
        with pytest.raises(ParseError):
            Document.from_json("[]")

    def test_construct(self):
        """Documents can be built in code with the default context."""
        document = Document(object=Object(type=ObjectType.NOTE))
        document.set_field("content", "Hello")
        assert document.to_dict() == {
            "@context": "https://www.w3.org/ns/activitystreams",
            "type": "Note",
            "content": "Hello",
        }

    def test_context_field_not_emitted_twice(self, caplog):
        """An open-tail @context never overrides the document context."""
        document = Document(object=Object(type=ObjectType.NOTE), context=Context("https://ex/ns"))
        with caplog.at_level(logging.WARNING, logger="activitydoc.objects"):
            document.set_field("@context", "https://other/ns")
        assert document.to_dict()["@context"] == "https://ex/ns"
        assert "shadows" in caplog.text


class TestDocumentFields:
    """Test field access through a document."""

    def test_get_field(self, example_1):
        """Open-tail fields read as strings."""
        document = Document.from_json(example_1)
        assert document.get_field("inbox", str) == "https://social.example/alyssa/inbox/"

    def test_set_field(self, example_1):
        """Open-tail fields can be overwritten."""
        document = Document.from_json(example_1)
        new_inbox = "https://social.example/brenda/inbox/"
        document.set_field("inbox", new_inbox)
        assert document.get_field("inbox", str) == new_inbox
        assert json.loads(document.to_json())["inbox"] == new_inbox

    def test_nested_object(self, example_16):
        """A nested object reads as an Object with its own fields."""
        document = Document.from_json(example_16)
        inner = document.get_field("object", Object)
        assert inner.type == ObjectType.NOTE
        assert inner.get_field("content", str) == "This is a note"

    def test_nested_object_wrong_type(self, example_16):
        """A nested object does not read as a Link."""
        document = Document.from_json(example_16)
        assert document.get_field("object", Link) is None

    def test_absent_field(self, example_16):
        """Absent fields read as None."""
        document = Document.from_json(example_16)
        assert document.get_field("target", Object) is None
        assert not document.has_field("target")

    def test_extract_union(self, example_16):
        """Extracting into an aggregate resolves the union variant."""
        @dataclass
        class Inner:
            object: ObjectOrLink

        document = Document.from_json(example_16)
        inner = document.extract(Inner)
        assert isinstance(inner.object, Object)
        assert inner.object.type == ObjectType.NOTE

    def test_extract_link(self):
        """A link-shaped member extracts as a Link."""
        @dataclass
        class Inner:
            object: ObjectOrLink

        document = Document.from_dict({
            "@context": "https://www.w3.org/ns/activitystreams",
            "type": "Like",
            "object": {"type": "Link", "href": "https://ex/post/1"},
        })
        inner = document.object.extract(Inner)
        assert isinstance(inner.object, Link)
        assert inner.object.href == "https://ex/post/1"

    def test_extract_includes_known_fields(self, example_16):
        """Document extraction sees @context, id and type."""
        @dataclass
        class Envelope:
            context: Annotated[str, Field(alias="@context")]
            type: ObjectType = ObjectType.OBJECT
            to: List[str] = field(default_factory=list)

        document = Document.from_json(example_16)
        envelope = document.extract(Envelope)
        assert envelope.context == "https://www.w3.org/ns/activitystreams"
        assert envelope.type == ObjectType.CREATE
        assert envelope.to == ["https://example.org/~john/"]

    def test_extract_failure(self, example_1):
        """Extraction into an incompatible type reads as None."""
        @dataclass
        class Inner:
            object: ObjectOrLink

        document = Document.from_json(example_1)
        assert document.extract(Inner) is None
