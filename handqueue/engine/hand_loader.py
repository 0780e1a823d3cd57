import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .enums import Street


def load_hand(path: str | Path) -> dict[str, Any]:
    """
    Load and normalize a stored hand record.

    Args:
        path: Path to a JSON hand/puzzle document

    Returns:
        Normalized hand dict with "hero" and "action" keys
    """
    with open(Path(path)) as f:
        raw = json.load(f)
    hand = normalize_hand(raw)
    validate_hand_structure(hand)
    return hand


def normalize_hand(raw: Mapping[str, Any]) -> dict[str, Any]:
    """
    Normalize a raw hand record.

    Stored documents use "Hero"/"Action" while exported ones use lower-case
    keys, and street names are not always lower case. The rest of the record
    is passed through untouched.

    Args:
        raw: Raw hand record

    Returns:
        Copy of the record with "hero" and "action" keys and lower-case street names
    """
    if not isinstance(raw, Mapping):
        raise ValueError(f"Hand record must be a JSON object, got {type(raw).__name__}")

    out = {k: v for k, v in raw.items() if k not in ("Hero", "Action")}
    out["hero"] = raw.get("hero", raw.get("Hero"))
    out["action"] = _normalize_streets(raw.get("action", raw.get("Action")))
    return out


def _normalize_streets(action: Any) -> Any:
    """Lower-case street names and drop keys that are not streets."""
    if not isinstance(action, Mapping):
        return action
    streets = {s.value for s in Street}
    norm = {}
    for k, v in action.items():
        if isinstance(k, str) and k.lower() in streets:
            norm[k.lower()] = v
    return norm


def validate_hand_structure(hand: Mapping[str, Any]) -> bool:
    """
    Validate that a normalized hand can be replayed.

    Returns:
        True if valid, raises ValueError if invalid
    """
    hero = hand.get("hero")
    if not isinstance(hero, str) or not hero:
        raise ValueError("Hand record missing hero position")

    action = hand.get("action")
    if not isinstance(action, Mapping):
        raise ValueError("Hand record action must be a mapping of streets")

    return True
