from collections.abc import Mapping
from typing import Any


def extract_board_cards(street_data: Mapping[str, Any], expected_min_length: int) -> str | None:
    """
    Find the community cards revealed on a street.

    Cards are usually a street-level "Cards" field, but some records embed
    them under one seat's action entry instead.

    Args:
        street_data: Raw street mapping
        expected_min_length: Minimum card string length for nested matches
            (6 for the flop, 2 for the turn and river)

    Returns:
        The card string, or None if the street carries no board cards
    """
    cards = street_data.get("Cards")
    if isinstance(cards, str) and cards:
        return cards
    for value in street_data.values():
        if isinstance(value, Mapping):
            nested = value.get("Cards")
            if isinstance(nested, str) and len(nested) >= expected_min_length:
                return nested
    return None
