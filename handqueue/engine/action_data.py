"""
Data structures passed between the decoding, reconstruction and replay layers.

Everything here is immutable: reconstructors build new values instead of
mutating the ones they were handed.
"""

from dataclasses import dataclass, field
from typing import Any

from .enums import ActionType
from .positions import Position


@dataclass(frozen=True)
class SeatKey:
    """A decoded street key such as "BTN" or "BTN_2"."""
    position: Position
    is_second_orbit: bool = False


@dataclass(frozen=True)
class SeatAction:
    """
    One recorded action for a seat, with its label already canonical.

    `label` keeps the raw text of an ActionType.OTHER action.
    """
    action: ActionType
    amount: float = 0.0
    label: str | None = None

    def with_amount(self, amount: float) -> "SeatAction":
        return SeatAction(self.action, amount, self.label)


@dataclass(frozen=True)
class DecodedStreet:
    """A street map split into first-orbit and second-orbit actions per position."""
    first_orbit: dict[Position, SeatAction] = field(default_factory=dict)
    second_orbit: dict[Position, SeatAction] = field(default_factory=dict)
    # Positive-amount wagers in input order, as (action, amount)
    wagers: tuple[tuple[ActionType, float], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.first_orbit and not self.second_orbit


@dataclass(frozen=True)
class HandActionEvent:
    """One step of the reconstructed hand."""
    position: Position | None
    action: ActionType
    amount: float = 0.0
    is_board: bool = False
    board_cards: str | None = None
    label: str | None = None

    @classmethod
    def seat(
        cls, position: Position, action: ActionType, amount: float = 0.0, label: str | None = None
    ) -> "HandActionEvent":
        return cls(position=position, action=action, amount=amount, label=label)

    @classmethod
    def board(cls, cards: str) -> "HandActionEvent":
        return cls(position=None, action=ActionType.BOARD, amount=0.0, is_board=True, board_cards=cards)

    @property
    def action_label(self) -> str:
        """The label as recorded: the canonical name, or the raw text of an unrecognized action."""
        return self.label or self.action.value

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "position": self.position.value if self.position else "",
            "action": self.action_label,
            "amount": self.amount,
            "isBoard": self.is_board,
        }
        if self.board_cards is not None:
            d["boardCards"] = self.board_cards
        return d

    def __str__(self) -> str:
        if self.is_board:
            return f"Board [{self.board_cards}]"
        if self.amount:
            return f"{self.position} {self.action_label} {self.amount:g}"
        return f"{self.position} {self.action_label}"


@dataclass(frozen=True)
class StreetResult:
    """Events produced for one street and the positions that folded during it."""
    actions: tuple[HandActionEvent, ...]
    folded: frozenset[Position] = frozenset()
