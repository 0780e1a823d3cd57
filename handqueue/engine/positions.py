from enum import Enum

from .enums import Street


SMALL_BLIND = 0.5
BIG_BLIND = 1.0


class Position(str, Enum):
    UTG = "UTG"
    HJ = "HJ"
    CO = "CO"
    BTN = "BTN"
    SB = "SB"
    BB = "BB"

    def __str__(self):
        return self.value

    @property
    def is_blind(self) -> bool:
        return self in (Position.SB, Position.BB)

    @classmethod
    def from_label(cls, label) -> "Position | None":
        """Return the position named by `label`, or None for anything else."""
        if isinstance(label, Position):
            return label
        if not isinstance(label, str):
            return None
        try:
            return cls(label)
        except ValueError:
            return None


class BettingOrder:
    """
    Speaking orders for a six-handed table.

    Both orders are fixed: preflop action starts left of the big blind,
    postflop action starts left of the button.
    """

    PREFLOP_ORDER: tuple[Position, ...] = (
        Position.UTG, Position.HJ, Position.CO, Position.BTN, Position.SB, Position.BB,
    )

    POSTFLOP_ORDER: tuple[Position, ...] = (
        Position.SB, Position.BB, Position.UTG, Position.HJ, Position.CO, Position.BTN,
    )

    @classmethod
    def get_betting_order(cls, street: Street) -> tuple[Position, ...]:
        """
        Get the speaking order for a street.

        Args:
            street: PREFLOP, FLOP, TURN or RIVER

        Returns:
            Tuple of positions in speaking order (first to act -> last to act)
        """
        if Street(street) == Street.PREFLOP:
            return cls.PREFLOP_ORDER
        # FLOP, TURN, RIVER all use the same postflop order
        return cls.POSTFLOP_ORDER

    @classmethod
    def get_first_to_act(cls, street: Street) -> Position:
        return cls.get_betting_order(street)[0]

    @classmethod
    def get_last_to_act(cls, street: Street) -> Position:
        return cls.get_betting_order(street)[-1]

    @classmethod
    def index_of(cls, street: Street, position: Position | None) -> int | None:
        """Index of `position` in the street's order, or None if it is not seated."""
        try:
            return cls.get_betting_order(street).index(position)
        except ValueError:
            return None

    @classmethod
    def active_positions(cls, street: Street, folded: frozenset[Position]) -> tuple[Position, ...]:
        """Speaking order for `street` with folded positions removed."""
        return tuple(p for p in cls.get_betting_order(street) if p not in folded)


PREFLOP_ORDER = BettingOrder.PREFLOP_ORDER
POSTFLOP_ORDER = BettingOrder.POSTFLOP_ORDER
ALL_POSITIONS = frozenset(Position)
