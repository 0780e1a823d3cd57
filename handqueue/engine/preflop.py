"""
Preflop reconstruction.

Turns the sparse preflop map into an ordered list of events: the two blind
postings, a first orbit in preflop order, and a second orbit for seats that
had to answer a re-raise.
"""

from collections.abc import Mapping
from typing import Any

from . import inference
from .action_data import HandActionEvent, SeatAction, StreetResult
from .enums import ActionType, Street
from .logger import get_logger
from .positions import BIG_BLIND, SMALL_BLIND, BettingOrder, Position, PREFLOP_ORDER
from .street_decoder import decode_street

logger = get_logger(__name__)


def blind_posts() -> tuple[HandActionEvent, HandActionEvent]:
    return (
        HandActionEvent.seat(Position.SB, ActionType.POST, SMALL_BLIND),
        HandActionEvent.seat(Position.BB, ActionType.POST, BIG_BLIND),
    )


def _fill_calls(orbit: dict[Position, SeatAction], amount: float) -> dict[Position, SeatAction]:
    """Give every zero-amount call the live raise amount."""
    return {
        pos: a.with_amount(amount) if a.action == ActionType.CALL and a.amount == 0 else a
        for pos, a in orbit.items()
    }


def _bets_as_raises(orbit: dict[Position, SeatAction]) -> dict[Position, SeatAction]:
    # Preflop the blinds are live, so any wager is a raise
    return {
        pos: SeatAction(ActionType.RAISE, a.amount) if a.action == ActionType.BET else a
        for pos, a in orbit.items()
    }


def _raise_summary(first_orbit: dict[Position, SeatAction], default_amount: float) -> tuple[Position | None, int, float]:
    """Original raiser, number of raises and the final raise amount, walked in preflop order."""
    original_raiser = None
    raise_count = 0
    final_raise_amount = default_amount
    for position in PREFLOP_ORDER:
        data = first_orbit.get(position)
        if data is not None and data.action == ActionType.RAISE:
            raise_count += 1
            if raise_count == 1:
                original_raiser = position
            final_raise_amount = data.amount
    return original_raiser, raise_count, final_raise_amount


def reconstruct_preflop(preflop_map: Mapping[str, Any] | None, hero: Any) -> StreetResult:
    """
    Build the ordered preflop events.

    Args:
        preflop_map: Raw preflop street mapping (missing or malformed is treated as empty)
        hero: Hero position label; the hero's actions are never inferred

    Returns:
        StreetResult with the events and every position that folded preflop
    """
    actions: list[HandActionEvent] = list(blind_posts())
    folded: set[Position] = set()

    street = decode_street(preflop_map if isinstance(preflop_map, Mapping) else {})
    if street.is_empty:
        logger.debug("No preflop entries, emitting blinds only")
        return StreetResult(tuple(actions), frozenset())

    hero_position = Position.from_label(hero)
    hero_index = BettingOrder.index_of(Street.PREFLOP, hero_position)
    if hero_index is None:
        logger.warning(f"Hero {hero!r} is not a seated position, treating the hero as absent")

    last_raise_amount = street.wagers[-1][1] if street.wagers else BIG_BLIND
    first = _fill_calls(_bets_as_raises(street.first_orbit), last_raise_amount)
    second = _fill_calls(_bets_as_raises(street.second_orbit), last_raise_amount)
    has_raise = any(a.action == ActionType.RAISE for a in first.values())

    def emit(position: Position, data: SeatAction) -> None:
        actions.append(HandActionEvent.seat(position, data.action, data.amount, data.label))
        if data.action == ActionType.FOLD:
            folded.add(position)

    def emit_inferred(event: HandActionEvent | None) -> None:
        if event is None:
            return
        actions.append(event)
        if event.action == ActionType.FOLD:
            folded.add(event.position)

    # First orbit, up to the hero
    before_hero = PREFLOP_ORDER if hero_index is None else PREFLOP_ORDER[:hero_index]
    for position in before_hero:
        if position in first:
            emit(position, first[position])
        else:
            emit_inferred(inference.preflop_silence_before_hero(position, has_raise))

    if hero_index is not None:
        if hero_position in first:
            emit(hero_position, first[hero_position])
        for position in PREFLOP_ORDER[hero_index + 1:]:
            if position in folded:
                continue
            if position in first:
                emit(position, first[position])
            else:
                emit_inferred(inference.preflop_silence_after_hero(position))

    original_raiser, raise_count, final_raise_amount = _raise_summary(first, last_raise_amount)

    # Second orbit: seats answering a re-raise
    for position in PREFLOP_ORDER:
        if position in folded:
            continue
        if position in second:
            emit(position, second[position])
        else:
            emit_inferred(inference.opener_facing_reraise(
                position, original_raiser, raise_count, final_raise_amount))
        if position == hero_position:
            break

    logger.debug(f"Preflop: {len(actions)} events, folded={sorted(p.value for p in folded)}")
    return StreetResult(tuple(actions), frozenset(folded))
