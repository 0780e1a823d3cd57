"""
Queue Observation Builder - fixed-size feature rows for a rebuilt action queue.

One row per event, so a rules engine or model can consume the replay as a
matrix instead of walking dataclasses.

Row layout (17 features):
- position one-hot (6, all zero for board events)
- action one-hot (8, unrecognized labels share the Other slot)
- amount in big blinds (1)
- is_board flag (1)
- board cards revealed so far, including this event (1)
"""

import numpy as np

from .action_data import HandActionEvent
from .enums import ActionType
from .positions import BIG_BLIND, PREFLOP_ORDER
from .replay import parse_cards


class QueueObservationBuilder:
    """Builds observation matrices from action queues."""

    def __init__(self, big_blind: float = BIG_BLIND):
        self.big_blind = big_blind

        # One-hot index maps
        self.position_to_index = {p: i for i, p in enumerate(PREFLOP_ORDER)}
        self.action_to_index = {a: i for i, a in enumerate(ActionType)}

    @property
    def total_features(self) -> int:
        return len(self.position_to_index) + len(self.action_to_index) + 3

    def encode_event(self, event: HandActionEvent, board_count: int) -> np.ndarray:
        """Encode a single event; `board_count` is the number of board cards shown after it."""
        row = np.zeros(self.total_features, dtype=np.float32)
        offset = len(self.position_to_index)

        if event.position is not None:
            row[self.position_to_index[event.position]] = 1.0
        row[offset + self.action_to_index[event.action]] = 1.0

        offset += len(self.action_to_index)
        row[offset] = event.amount / self.big_blind
        row[offset + 1] = 1.0 if event.is_board else 0.0
        row[offset + 2] = board_count
        return row

    def encode(self, queue: tuple[HandActionEvent, ...] | list[HandActionEvent]) -> np.ndarray:
        """
        Encode a whole queue.

        Returns:
            float32 array of shape (len(queue), total_features)
        """
        rows = []
        board_count = 0
        for event in queue:
            if event.is_board and event.board_cards:
                board_count += len(parse_cards(event.board_cards))
            rows.append(self.encode_event(event, board_count))

        if not rows:
            return np.zeros((0, self.total_features), dtype=np.float32)
        return np.stack(rows)


def encode_action_queue(queue: tuple[HandActionEvent, ...] | list[HandActionEvent]) -> np.ndarray:
    """Convenience function to encode a queue with default settings."""
    return QueueObservationBuilder().encode(queue)
