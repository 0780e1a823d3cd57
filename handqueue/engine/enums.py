from enum import Enum


class Street(str, Enum):
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"

    @property
    def board_length(self) -> int:
        """Minimum length of the card string revealed on this street."""
        return _BOARD_LENGTHS[self]


_BOARD_LENGTHS = {
    Street.PREFLOP: 0,
    Street.FLOP: 6,
    Street.TURN: 2,
    Street.RIVER: 2,
}

POSTFLOP_STREETS = (Street.FLOP, Street.TURN, Street.RIVER)


class ActionType(str, Enum):
    POST = "Post"
    FOLD = "Fold"
    CHECK = "Check"
    CALL = "Call"
    BET = "Bet"
    RAISE = "Raise"
    BOARD = "Board"
    # A recorded label outside this vocabulary, carried through verbatim
    OTHER = "Other"

    @property
    def is_aggressive(self) -> bool:
        return self in (ActionType.BET, ActionType.RAISE)
