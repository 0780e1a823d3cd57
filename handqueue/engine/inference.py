"""
Inference policies for seats the sparse record leaves out.

Each rule decides what a silent (or out-of-turn) seat must have done. The
reconstructors call these instead of branching inline, so every inferred
event can be traced back to a named rule in the debug log.
"""

from enum import Enum

from .action_data import DecodedStreet, HandActionEvent, SeatAction
from .enums import ActionType
from .logger import get_logger
from .positions import Position

logger = get_logger(__name__)


class InferenceRule(str, Enum):
    SILENT_SEAT_FOLDS = "silent_seat_folds"
    UNRAISED_BLIND_STAYS_LIVE = "unraised_blind_stays_live"
    OPENER_CALLS_RERAISE = "opener_calls_reraise"
    SILENT_SEAT_CHECKED = "silent_seat_checked"
    CHECKED_BEFORE_BET = "checked_before_bet"
    SILENT_SEAT_CALLS = "silent_seat_calls"


def _inferred(rule: InferenceRule, position: Position, action: ActionType, amount: float = 0.0) -> HandActionEvent:
    logger.debug(f"{position}: inferred {action.value} {amount:g} ({rule.value})")
    return HandActionEvent.seat(position, action, amount)


def preflop_silence_before_hero(position: Position, has_raise: bool) -> HandActionEvent | None:
    """
    A silent seat that speaks before the hero folded, except a blind in an
    unraised pot, which is simply still in the hand.
    """
    if position.is_blind and not has_raise:
        logger.debug(f"{position}: no entry, left live ({InferenceRule.UNRAISED_BLIND_STAYS_LIVE.value})")
        return None
    return _inferred(InferenceRule.SILENT_SEAT_FOLDS, position, ActionType.FOLD)


def preflop_silence_after_hero(position: Position) -> HandActionEvent:
    return _inferred(InferenceRule.SILENT_SEAT_FOLDS, position, ActionType.FOLD)


def opener_facing_reraise(
    position: Position,
    original_raiser: Position | None,
    raise_count: int,
    final_raise_amount: float,
) -> HandActionEvent | None:
    """The original raiser who left no later entry called the re-raise."""
    if raise_count > 1 and position == original_raiser:
        return _inferred(InferenceRule.OPENER_CALLS_RERAISE, position, ActionType.CALL, final_raise_amount)
    return None


def postflop_silence_before_bet(
    index: int,
    active: tuple[Position, ...],
    street: DecodedStreet,
) -> HandActionEvent | None:
    """A silent seat checked if the street visibly continued past it."""
    if any(p in street.first_orbit for p in active[index + 1:]):
        return _inferred(InferenceRule.SILENT_SEAT_CHECKED, active[index], ActionType.CHECK)
    return None


def postflop_response_before_bet(
    position: Position,
    recorded: SeatAction,
    index: int,
    aggressor_index: int | None,
) -> HandActionEvent | None:
    """
    A seat whose first entry is a call or fold, but which speaks before the
    aggressor, must have checked before the bet existed.
    """
    if aggressor_index is not None and index < aggressor_index:
        logger.debug(f"{position}: recorded {recorded.action.value} answers a later bet")
        return _inferred(InferenceRule.CHECKED_BEFORE_BET, position, ActionType.CHECK)
    return None


def postflop_silence_after_bet(position: Position, last_bet_amount: float) -> HandActionEvent:
    """A silent seat behind a live bet called it."""
    return _inferred(InferenceRule.SILENT_SEAT_CALLS, position, ActionType.CALL, last_bet_amount)
