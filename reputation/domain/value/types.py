"""Domain value objects for the reputation engine.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from reputation.domain.value.common import ValueObject
from reputation.domain.value.identifiers import VotableId


class ActionType(str, Enum):
    """User action that may earn reputation points.

    Which actions are worth points, and how many, is platform
    configuration (see ``PointsSettings``); adding a member here only
    makes the action expressible.
    """

    COMMENT_CREATED = "comment_created"
    LIKE_RECEIVED = "like_received"
    COMMENT_RECEIVED = "comment_received"
    BLOG_CREATED = "blog_created"
    BLOG_FEATURED = "blog_featured"
    POST_CREATED = "post_created"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    THREAD = "thread"
    REPLY = "reply"


class VoteType(str, Enum):
    """Direction of a cast vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class UserVote(str, Enum):
    """A voter's current standing on a votable."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    NONE = "none"

    @classmethod
    def from_vote_type(cls, vote_type: VoteType | None) -> "UserVote":
        if vote_type is None:
            return cls.NONE
        return cls(vote_type.value)


class PointsTier(str, Enum):
    """Badge tier derived from a point balance."""

    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    NONE = "none"

    @classmethod
    def for_points(cls, points: int) -> "PointsTier":
        if points >= 1000:
            return cls.GOLD
        if points >= 500:
            return cls.SILVER
        if points >= 100:
            return cls.BRONZE
        return cls.NONE


class VotableRef(ValueObject):
    """Polymorphic reference to a thread or reply."""

    votable_type: VotableType
    votable_id: VotableId

    @field_validator("votable_id")
    @classmethod
    def validate_votable_id(cls, v: str) -> str:
        """Validate id is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Votable id must be 1-255 characters")
        return v

    def __str__(self) -> str:
        return f"{self.votable_type.value}:{self.votable_id}"
