from handqueue.engine.enums import ActionType
from handqueue.engine.positions import Position


def summarize(events):
    """(position, action, amount) triples; board events become (None, "Board", cards)."""
    out = []
    for e in events:
        if e.is_board:
            out.append((None, ActionType.BOARD.value, e.board_cards))
        else:
            out.append((e.position.value, e.action_label, e.amount))
    return out


def folded(*labels):
    return frozenset(Position(label) for label in labels)


POSTS = [("SB", "Post", 0.5), ("BB", "Post", 1.0)]
