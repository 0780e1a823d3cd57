"""
Postflop reconstruction for a single street (flop, turn or river).

The aggressor can sit anywhere in the rotation, so the street is walked
twice: once to find who opened the betting, and once to resolve every other
live seat's answer to that bet.
"""

from collections.abc import Mapping
from typing import Any

from . import inference
from .action_data import HandActionEvent, SeatAction, StreetResult
from .enums import ActionType, Street
from .logger import get_logger
from .positions import BettingOrder, Position
from .street_decoder import decode_street

logger = get_logger(__name__)

_RESPONSES = (ActionType.CALL, ActionType.FOLD, ActionType.RAISE)
_OPENING = (ActionType.BET, ActionType.RAISE, ActionType.CHECK)


def _fill_calls(orbit: dict[Position, SeatAction], amount: float) -> dict[Position, SeatAction]:
    return {
        pos: a.with_amount(amount) if a.action == ActionType.CALL and a.amount == 0 else a
        for pos, a in orbit.items()
    }


def find_aggressor_index(active: tuple[Position, ...], first_orbit: dict[Position, SeatAction]) -> int | None:
    """Index in `active` of the first seat whose first action is a bet or raise."""
    for i, position in enumerate(active):
        data = first_orbit.get(position)
        if data is not None and data.action.is_aggressive:
            return i
    return None


def reconstruct_postflop(
    street_map: Mapping[str, Any],
    hero: Any,
    folded: frozenset[Position] = frozenset(),
    street: Street = Street.FLOP,
) -> StreetResult:
    """
    Build the ordered events for one postflop street.

    Args:
        street_map: Raw street mapping
        hero: Hero position label; the street is cut off where the hero is undecided
        folded: Positions already out of the hand entering this street
        street: Which street is being rebuilt (only used for logging)

    Returns:
        StreetResult with this street's events and the positions that folded on it
    """
    actions: list[HandActionEvent] = []
    newly_folded: set[Position] = set()

    decoded = decode_street(street_map)
    hero_position = Position.from_label(hero)

    last_bet_amount = decoded.wagers[-1][1] if decoded.wagers else 0
    first = decoded.first_orbit
    second = decoded.second_orbit
    if last_bet_amount > 0:
        first = _fill_calls(first, last_bet_amount)
        second = _fill_calls(second, last_bet_amount)

    active = BettingOrder.active_positions(street, folded)
    aggressor_index = find_aggressor_index(active, first)

    def emit(position: Position, data: SeatAction) -> None:
        actions.append(HandActionEvent.seat(position, data.action, data.amount, data.label))
        if data.action == ActionType.FOLD:
            newly_folded.add(position)

    def emit_inferred(event: HandActionEvent | None) -> None:
        if event is not None:
            actions.append(event)

    # First pass: checks up to the opening bet
    for i, position in enumerate(active):
        if position == hero_position and position not in first:
            break
        data = first.get(position)
        if data is None:
            emit_inferred(inference.postflop_silence_before_bet(i, active, decoded))
        elif data.action in _OPENING:
            emit(position, data)
            if data.action.is_aggressive:
                break
        elif data.action in (ActionType.CALL, ActionType.FOLD):
            emit_inferred(inference.postflop_response_before_bet(position, data, i, aggressor_index))
        elif data.action == ActionType.OTHER:
            emit(position, data)

    if aggressor_index is None:
        logger.debug(f"{street.value}: no bet, {len(actions)} events")
        return StreetResult(tuple(actions), frozenset(newly_folded))

    # Second pass: seats behind the aggressor answer the bet
    for position in active[aggressor_index + 1:]:
        if position == hero_position and position not in first:
            break
        data = first.get(position)
        if data is None:
            emit_inferred(inference.postflop_silence_after_bet(position, last_bet_amount))
        elif data.action in _RESPONSES or data.action == ActionType.OTHER:
            emit(position, data)
        if position == hero_position:
            break

    # Seats that checked ahead of the aggressor now answer it
    for position in active[:aggressor_index]:
        if position == hero_position:
            hero_first = first.get(position)
            if position not in second and (hero_first is None or hero_first.action != ActionType.CALL):
                break
        data = second.get(position)
        if data is not None:
            emit(position, data)
        else:
            data = first.get(position)
            if data is not None and data.action in _RESPONSES:
                emit(position, data)
        if position == hero_position:
            break

    logger.debug(
        f"{street.value}: aggressor={active[aggressor_index]}, {len(actions)} events, "
        f"folded={sorted(p.value for p in newly_folded)}"
    )
    return StreetResult(tuple(actions), frozenset(newly_folded))
