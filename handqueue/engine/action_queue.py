"""
Action queue orchestration.

Runs the preflop reconstructor once, then each postflop street in order,
threading the folded set forward and placing each street's board reveal
ahead of that street's actions.
"""

from collections.abc import Mapping
from typing import Any

from .action_data import HandActionEvent
from .board import extract_board_cards
from .enums import POSTFLOP_STREETS, Street
from .logger import get_logger
from .positions import Position
from .postflop import reconstruct_postflop
from .preflop import reconstruct_preflop

logger = get_logger(__name__)


class ActionQueueBuilder:
    """
    Rebuilds the ordered action queue for one hand.

    The builder holds no state beyond its inputs; `build()` can be called any
    number of times and always returns an equal tuple. `folded_by_street`
    exposes the running folded set after each street that was played.
    """

    def __init__(self, per_street_map: Mapping[str, Any] | None, hero: Any):
        self.per_street_map = per_street_map if isinstance(per_street_map, Mapping) else {}
        self.hero = hero

    def __str__(self) -> str:
        streets = [s.value for s in Street if isinstance(self.per_street_map.get(s.value), Mapping)]
        return f"ActionQueueBuilder(hero={self.hero!r}, streets={streets})"

    def build(self) -> tuple[HandActionEvent, ...]:
        queue, _ = self._run()
        return queue

    @property
    def folded_by_street(self) -> dict[Street, frozenset[Position]]:
        _, folded_by_street = self._run()
        return folded_by_street

    def _run(self) -> tuple[tuple[HandActionEvent, ...], dict[Street, frozenset[Position]]]:
        queue: list[HandActionEvent] = []
        folded_by_street: dict[Street, frozenset[Position]] = {}

        preflop = reconstruct_preflop(self.per_street_map.get(Street.PREFLOP.value), self.hero)
        queue.extend(preflop.actions)
        folded = preflop.folded
        folded_by_street[Street.PREFLOP] = folded

        for street in POSTFLOP_STREETS:
            street_data = self.per_street_map.get(street.value)
            if not isinstance(street_data, Mapping):
                if street_data is not None:
                    logger.debug(f"Skipping {street.value}: not a mapping ({type(street_data).__name__})")
                continue

            cards = extract_board_cards(street_data, street.board_length)
            if cards:
                queue.append(HandActionEvent.board(cards))
            else:
                logger.debug(f"No board cards found for {street.value}")

            result = reconstruct_postflop(street_data, self.hero, folded, street)
            queue.extend(result.actions)
            folded = folded | result.folded
            folded_by_street[street] = folded

        return tuple(queue), folded_by_street


def build_action_queue(per_street_map: Mapping[str, Any] | None, hero: Any) -> tuple[HandActionEvent, ...]:
    """
    Rebuild the full, ordered action queue for a hand.

    Args:
        per_street_map: Mapping with "preflop" and optional "flop"/"turn"/"river" street maps
        hero: Hero position label (e.g. "BTN")

    Returns:
        Tuple of HandActionEvent in replay order
    """
    return ActionQueueBuilder(per_street_map, hero).build()
