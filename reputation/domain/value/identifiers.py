"""Strongly typed identifiers for reputation entities.

Actors and votables are owned by the surrounding platform, which hands
the engine opaque string ids. Log entries are the only ids minted here.
"""

from typing import NewType
from uuid import UUID

ActorId = NewType("ActorId", str)
VotableId = NewType("VotableId", str)
ActionLogId = NewType("ActionLogId", UUID)
