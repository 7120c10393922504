"""Diminishing-returns policy table.

Repeating the same action inside the trailing window first halves (or
otherwise reduces) the award, then stops it entirely:

    recent <  full_threshold                      -> base points
    full_threshold <= recent < reduced_threshold  -> floor(base * multiplier)
    recent >= reduced_threshold                   -> 0

``recent`` is the number of logged actions of the same type before the
current one.
"""

import math
from typing import Optional

from pydantic import Field, model_validator

from reputation.domain.model.common import DomainModel
from reputation.domain.value import ActionType


class ActionPolicy(DomainModel):
    """Thresholds for one action type."""

    full_threshold: int = Field(ge=0)
    reduced_threshold: int = Field(ge=0)
    reduced_multiplier: float = Field(ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_threshold_order(self) -> "ActionPolicy":
        """Reduced tier must start no earlier than the full tier ends."""
        if self.reduced_threshold < self.full_threshold:
            raise ValueError("reduced_threshold must be >= full_threshold")
        return self


class ActionPolicyTable(DomainModel):
    """Policies keyed by action type. Unlisted types are never reduced."""

    policies: dict[ActionType, ActionPolicy] = Field(default_factory=dict)

    def policy_for(self, action_type: ActionType) -> Optional[ActionPolicy]:
        return self.policies.get(action_type)


def apply_diminishing_returns(
    base_points: int, recent_count: int, policy: Optional[ActionPolicy]
) -> int:
    """Return the points actually granted for one action.

    Args:
        base_points: Configured value of the action (must be positive)
        recent_count: Same-type actions already logged inside the window
        policy: Thresholds for the action type, or None for no reduction

    Returns:
        Adjusted points (0 when the action is over the reduced threshold)
    """
    if policy is None:
        return base_points
    if recent_count >= policy.reduced_threshold:
        return 0
    if recent_count >= policy.full_threshold:
        return math.floor(base_points * policy.reduced_multiplier)
    return base_points
