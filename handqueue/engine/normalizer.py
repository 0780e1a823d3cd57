"""
Action label normalization.

Upstream records sometimes carry raise sizing context in the label itself
("3Bet", "4-bet"). The engine only cares that such an action is a raise.
"""

import re

from .enums import ActionType


_NUMBERED_RAISE = re.compile(r"[345]-?bet", re.IGNORECASE)

_BY_LOWER_LABEL = {a.value.lower(): a for a in ActionType if a is not ActionType.OTHER}


def normalize_action(label: str) -> str:
    """Map numbered raise labels to "Raise"; return every other label unchanged."""
    if _NUMBERED_RAISE.fullmatch(label):
        return ActionType.RAISE.value
    return label


def to_action_type(label: str) -> ActionType | None:
    """
    Normalize a raw label and resolve it to an ActionType.

    Args:
        label: Raw action label such as "Call", "3bet" or "check"

    Returns:
        The matching ActionType, or None when the label is outside the vocabulary
    """
    return _BY_LOWER_LABEL.get(normalize_action(label).lower())
