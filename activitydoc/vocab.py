# activitydoc/vocab.py
"""
Closed ActivityStreams vocabulary enumerations.

Member values are the exact (case-sensitive) strings used on the wire.
"""

from enum import Enum


class ObjectType(Enum):
    """Any type an Object may carry."""
    # Activity types
    ACTIVITY = "Activity"
    INTRANSITIVE_ACTIVITY = "IntransitiveActivity"

    ACCEPT = "Accept"
    ADD = "Add"
    ANNOUNCE = "Announce"
    ARRIVE = "Arrive"
    BLOCK = "Block"
    CREATE = "Create"
    DELETE = "Delete"
    DISLIKE = "Dislike"
    FLAG = "Flag"
    FOLLOW = "Follow"
    IGNORE = "Ignore"
    INVITE = "Invite"
    JOIN = "Join"
    LEAVE = "Leave"
    LIKE = "Like"
    LISTEN = "Listen"
    MOVE = "Move"
    OFFER = "Offer"
    QUESTION = "Question"
    REJECT = "Reject"
    READ = "Read"
    REMOVE = "Remove"
    TENTATIVE_ACCEPT = "TentativeAccept"
    TENTATIVE_REJECT = "TentativeReject"
    TRAVEL = "Travel"
    UNDO = "Undo"
    UPDATE = "Update"
    VIEW = "View"

    # Actor types
    ACTOR = "Actor"

    APPLICATION = "Application"
    GROUP = "Group"
    ORGANISATION = "Organisation"
    PERSON = "Person"
    SERVICE = "Service"

    # Object types
    OBJECT = "Object"

    ARTICLE = "Article"
    AUDIO = "Audio"
    DOCUMENT = "Document"
    EVENT = "Event"
    IMAGE = "Image"
    NOTE = "Note"
    PAGE = "Page"
    PLACE = "Place"
    PROFILE = "Profile"
    RELATIONSHIP = "Relationship"
    TOMBSTONE = "Tombstone"
    VIDEO = "Video"

    # Collection types
    COLLECTION = "Collection"
    COLLECTION_PAGE = "CollectionPage"
    ORDERED_COLLECTION = "OrderedCollection"
    ORDERED_COLLECTION_PAGE = "OrderedCollectionPage"


class LinkType(Enum):
    """Types a Link may carry."""
    LINK = "Link"
    MENTION = "Mention"


class ActorType(Enum):
    """Types an Actor may carry."""
    APPLICATION = "Application"
    GROUP = "Group"
    ORGANISATION = "Organisation"
    PERSON = "Person"
    SERVICE = "Service"
