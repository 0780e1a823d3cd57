"""
Decoding of sparse, position-keyed street maps.

A street map looks like::

    {"UTG": {"Action": "Raise", "Amount": 3},
     "BTN": {"Action": "3Bet", "Amount": 9},
     "UTG_2": {"Action": "Call"}}

Keys and labels are decoded once here so the reconstructors never branch
on raw strings. Entries that cannot be decoded are skipped, never raised.
A string label outside the vocabulary still counts as the seat having
acted: it decodes to ActionType.OTHER with the raw label kept.
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any

from .action_data import DecodedStreet, SeatAction, SeatKey
from .enums import ActionType
from .logger import get_logger
from .normalizer import to_action_type
from .positions import Position

logger = get_logger(__name__)


def decode_key(key: Any) -> SeatKey | None:
    """
    Decode a street key into a position and orbit.

    "BTN" is the seat's first action in the street, "BTN_<suffix>" a later
    action by the same seat after the betting was reopened.
    """
    if not isinstance(key, str):
        return None
    position = Position.from_label(key)
    if position is not None:
        return SeatKey(position, is_second_orbit=False)
    for position in Position:
        if key.startswith(position.value + "_"):
            return SeatKey(position, is_second_orbit=True)
    return None


def parse_amount(value: Any) -> float:
    """Return a numeric Amount field, or 0 for anything else."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return 0
    return value


def decode_entry(value: Any) -> SeatAction | None:
    """Decode a single {"Action": ..., "Amount": ...} entry."""
    if not isinstance(value, Mapping):
        return None
    label = value.get("Action")
    if not isinstance(label, str):
        return None
    amount = parse_amount(value.get("Amount"))
    action = to_action_type(label)
    if action is None:
        logger.debug(f"Unrecognized action label {label!r}, keeping it as recorded")
        return SeatAction(ActionType.OTHER, amount, label)
    return SeatAction(action, amount)


def decode_street(street_map: Mapping) -> DecodedStreet:
    """
    Split a raw street map into first-orbit and second-orbit actions.

    Args:
        street_map: Raw mapping of street keys to action entries

    Returns:
        DecodedStreet with per-position actions and the positive wagers in input order
    """
    first_orbit: dict[Position, SeatAction] = {}
    second_orbit: dict[Position, SeatAction] = {}
    wagers = []

    for key, value in street_map.items():
        seat_key = decode_key(key)
        if seat_key is None:
            if key != "Cards":
                logger.debug(f"Skipping unrecognized street key {key!r}")
            continue
        seat_action = decode_entry(value)
        if seat_action is None:
            logger.debug(f"Skipping malformed entry for {key!r}: {value!r}")
            continue

        if seat_action.action.is_aggressive and seat_action.amount > 0:
            wagers.append((seat_action.action, seat_action.amount))

        if seat_key.is_second_orbit:
            second_orbit[seat_key.position] = seat_action
        else:
            first_orbit[seat_key.position] = seat_action

    return DecodedStreet(first_orbit=first_orbit, second_orbit=second_orbit, wagers=tuple(wagers))
