"""Parsing of raw vote parameters supplied by request handlers."""

from pydantic import ValidationError as PydanticValidationError

from reputation.domain.error import ValidationError
from reputation.domain.value import VotableId, VotableRef, VotableType, VoteType


def parse_votable_ref(votable_type: str, votable_id: str) -> VotableRef:
    """Build a votable reference from raw strings.

    Raises:
        ValidationError: If the type is not thread/reply or the id is invalid
    """
    try:
        parsed_type = VotableType(votable_type)
    except ValueError:
        raise ValidationError(f"Invalid votable type: {votable_type!r}")

    try:
        return VotableRef(votable_type=parsed_type, votable_id=VotableId(votable_id))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid votable id: {e.errors()[0]['msg']}")


def parse_vote_type(vote_type: str) -> VoteType:
    """Parse ``upvote``/``downvote``.

    Raises:
        ValidationError: For any other value
    """
    try:
        return VoteType(vote_type)
    except ValueError:
        raise ValidationError(
            f"Invalid vote type: {vote_type!r} (expected 'upvote' or 'downvote')"
        )
