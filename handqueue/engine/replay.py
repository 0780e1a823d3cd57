"""
Logical table replay.

Steps through an action queue one event at a time and keeps the table state
a consumer needs at each step: live wagers per seat, the pot swept from
earlier streets, folded seats and revealed board cards. Stepping back
restores the snapshot taken before the last step.
"""

from dataclasses import dataclass

from .action_data import HandActionEvent
from .enums import ActionType
from .positions import Position

_WAGERS = (ActionType.POST, ActionType.CALL, ActionType.BET, ActionType.RAISE)


def parse_cards(cards: str) -> list[str]:
    """Split "AsKdQc" into ["As", "Kd", "Qc"]."""
    return [cards[i:i + 2] for i in range(0, len(cards) - 1, 2)]


@dataclass(frozen=True)
class ReplaySnapshot:
    index: int
    pot: float
    current_bets: tuple[tuple[Position, float], ...]
    folded: frozenset[Position]
    board: tuple[str, ...]


class TableReplay:
    def __init__(self, queue: tuple[HandActionEvent, ...] | list[HandActionEvent]):
        self.queue = tuple(queue)
        self._history: list[ReplaySnapshot] = []
        self.reset()

    def __str__(self) -> str:
        bets = ", ".join(f"{p}={a:g}" for p, a in self.current_bets.items()) or "none"
        folded = ",".join(sorted(p.value for p in self.folded)) or "none"
        return (f"TableReplay(step {self.index + 1}/{len(self.queue)}, pot={self.pot:g}, "
                f"bets=[{bets}], folded=[{folded}], board={''.join(self.board) or '-'})")

    def reset(self) -> None:
        self.index = -1
        self.pot = 0.0
        self.current_bets: dict[Position, float] = {}
        self.folded: set[Position] = set()
        self.board: list[str] = []
        self._history.clear()

    @property
    def at_start(self) -> bool:
        return self.index < 0

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.queue) - 1

    @property
    def total_pot(self) -> float:
        """Swept pot plus the wagers still in front of the seats."""
        return self.pot + sum(self.current_bets.values())

    def snapshot(self) -> ReplaySnapshot:
        return ReplaySnapshot(
            index=self.index,
            pot=self.pot,
            current_bets=tuple(self.current_bets.items()),
            folded=frozenset(self.folded),
            board=tuple(self.board),
        )

    def restore(self, snapshot: ReplaySnapshot) -> None:
        self.index = snapshot.index
        self.pot = snapshot.pot
        self.current_bets = dict(snapshot.current_bets)
        self.folded = set(snapshot.folded)
        self.board = list(snapshot.board)

    def step_forward(self) -> HandActionEvent | None:
        """Apply the next event; returns it, or None when the queue is exhausted."""
        if self.at_end:
            return None
        self._history.append(self.snapshot())
        self.index += 1
        event = self.queue[self.index]
        self._apply(event)
        return event

    def step_backward(self) -> bool:
        """Undo the last step; False when already at the start."""
        if not self._history:
            return False
        self.restore(self._history.pop())
        return True

    def play_to_end(self) -> ReplaySnapshot:
        while self.step_forward() is not None:
            pass
        return self.snapshot()

    def _apply(self, event: HandActionEvent) -> None:
        if event.is_board:
            self._collect_pot()
            if event.board_cards:
                self.board.extend(parse_cards(event.board_cards))
        elif event.action in _WAGERS:
            # Amounts are street totals ("raise to"), not increments
            self.current_bets[event.position] = event.amount
        elif event.action == ActionType.FOLD:
            self.folded.add(event.position)

    def _collect_pot(self) -> None:
        self.pot += sum(self.current_bets.values())
        self.current_bets = {}
