from pathlib import Path

import pytest

from handqueue.engine.hand_loader import load_hand

HANDS_DIR = Path(__file__).parent / "data" / "hands"


@pytest.fixture
def hand_path():
    def _path(name: str) -> Path:
        return HANDS_DIR / f"{name}.json"
    return _path


@pytest.fixture
def load_named_hand(hand_path):
    def _load(name: str):
        return load_hand(hand_path(name))
    return _load
