import pytest

from handqueue.engine.action_data import HandActionEvent
from handqueue.engine.action_queue import ActionQueueBuilder, build_action_queue
from handqueue.engine.enums import ActionType, Street
from handqueue.engine.positions import Position
from tests.helpers import POSTS, folded, summarize

BTN_OPEN_BB_CALL = {
    "BTN": {"Action": "Raise", "Amount": 2.5},
    "BB": {"Action": "Call", "Cards": "AhKc"},
}

PREFLOP_BTN_VS_BB = POSTS + [
    ("UTG", "Fold", 0),
    ("HJ", "Fold", 0),
    ("CO", "Fold", 0),
    ("BTN", "Raise", 2.5),
    ("SB", "Fold", 0),
    ("BB", "Call", 2.5),
]

MULTI_STREET = {
    "preflop": BTN_OPEN_BB_CALL,
    "flop": {
        "Cards": "Ks7d2c",
        "BB": {"Action": "Check"},
        "BTN": {"Action": "Bet", "Amount": 3},
        "BB_2": {"Action": "Call"},
    },
    "turn": {
        "BB": {"Action": "Check", "Cards": "9s"},
        "BTN": {"Action": "Check"},
    },
    "river": {
        "Cards": "3h",
        "BB": {"Action": "Bet", "Amount": 12},
    },
}


class TestScenarios:
    def test_no_action(self):
        assert summarize(build_action_queue({"preflop": {}}, "BB")) == POSTS

    def test_missing_preflop_still_posts_blinds(self):
        assert summarize(build_action_queue({}, "BB")) == POSTS
        assert summarize(build_action_queue(None, "BB")) == POSTS

    def test_single_raise_hero_calls(self):
        queue = build_action_queue(
            {"preflop": {"BTN": {"Action": "Raise", "Amount": 3}, "BB": {"Action": "Call"}}}, "BB")
        assert summarize(queue) == POSTS + [
            ("UTG", "Fold", 0),
            ("HJ", "Fold", 0),
            ("CO", "Fold", 0),
            ("BTN", "Raise", 3),
            ("SB", "Fold", 0),
            ("BB", "Call", 3),
        ]

    def test_flop_check_bet_call(self):
        queue = build_action_queue({
            "preflop": BTN_OPEN_BB_CALL,
            "flop": {
                "Cards": "Ah7d2c",
                "BB": {"Action": "Check"},
                "BTN": {"Action": "Bet", "Amount": 5},
                "BB_2": {"Action": "Call"},
            },
        }, "BTN")
        assert summarize(queue) == PREFLOP_BTN_VS_BB + [
            (None, "Board", "Ah7d2c"),
            ("BB", "Check", 0),
            ("BTN", "Bet", 5),
            ("BB", "Call", 5),
        ]

    def test_multi_street_hand(self):
        queue = build_action_queue(MULTI_STREET, "BB")
        assert summarize(queue) == PREFLOP_BTN_VS_BB + [
            (None, "Board", "Ks7d2c"),
            ("BB", "Check", 0),
            ("BTN", "Bet", 3),
            ("BB", "Call", 3),
            (None, "Board", "9s"),
            ("BB", "Check", 0),
            ("BTN", "Check", 0),
            (None, "Board", "3h"),
            ("BB", "Bet", 12),
            ("BTN", "Call", 12),
        ]

    def test_unrecognized_label_is_not_turned_into_a_fold(self):
        queue = build_action_queue(
            {"preflop": {"CO": {"Action": "Allin", "Amount": 100}, "BB": {"Action": "Call"}}}, "BB")
        actions = summarize(queue)
        assert ("CO", "Allin", 100) in actions
        assert ("CO", "Fold", 0) not in actions

    def test_nested_flop_cards(self):
        queue = build_action_queue({
            "preflop": BTN_OPEN_BB_CALL,
            "flop": {"BTN": {"Cards": "AsKdQc"}},
        }, "BB")
        assert queue[len(PREFLOP_BTN_VS_BB)] == HandActionEvent.board("AsKdQc")


class TestStreetHandling:
    def test_street_without_cards_has_no_board_event(self):
        queue = build_action_queue({
            "preflop": BTN_OPEN_BB_CALL,
            "flop": {"BB": {"Action": "Check"}, "BTN": {"Action": "Check"}},
        }, "BTN")
        assert not any(e.is_board for e in queue)
        assert summarize(queue)[-2:] == [("BB", "Check", 0), ("BTN", "Check", 0)]

    @pytest.mark.parametrize("bad_street", ["Ks7d2c", 42, ["BB", "Check"]])
    def test_non_mapping_street_is_skipped(self, bad_street):
        queue = build_action_queue({"preflop": BTN_OPEN_BB_CALL, "flop": bad_street}, "BB")
        assert summarize(queue) == PREFLOP_BTN_VS_BB

    def test_missing_flop_skips_street_entirely(self):
        queue = build_action_queue({
            "preflop": BTN_OPEN_BB_CALL,
            "turn": {"Cards": "9s", "BB": {"Action": "Check"}},
        }, "BTN")
        assert summarize(queue)[len(PREFLOP_BTN_VS_BB):] == [
            (None, "Board", "9s"),
            ("BB", "Check", 0),
        ]

    def test_board_events_have_no_position(self):
        boards = [e for e in build_action_queue(MULTI_STREET, "BB") if e.is_board]
        assert len(boards) == 3
        assert all(e.position is None and e.action is ActionType.BOARD and e.amount == 0 for e in boards)

    def test_board_precedes_street_actions(self):
        queue = build_action_queue(MULTI_STREET, "BB")
        flop_index = next(i for i, e in enumerate(queue) if e.is_board)
        assert all(not e.is_board for e in queue[:flop_index])
        assert queue[flop_index + 1].position == Position.BB


class TestProperties:
    def test_first_two_events_are_blind_posts(self):
        for per_street, hero in [({"preflop": {}}, "BB"), (MULTI_STREET, "BB"), (MULTI_STREET, "UTG"), ({}, "XX")]:
            queue = build_action_queue(per_street, hero)
            assert summarize(queue[:2]) == POSTS
            assert [e.action for e in queue].count(ActionType.POST) == 2

    def test_idempotent(self):
        first = build_action_queue(MULTI_STREET, "BB")
        second = build_action_queue(MULTI_STREET, "BB")
        assert first == second
        assert [e.to_dict() for e in first] == [e.to_dict() for e in second]

    def test_folded_set_only_grows(self):
        per_street = {
            "preflop": {
                "CO": {"Action": "Raise", "Amount": 2.5},
                "BTN": {"Action": "Call"},
                "BB": {"Action": "Call"},
            },
            "flop": {"Cards": "Ts9s2d", "BB": {"Action": "Bet", "Amount": 4}, "CO": {"Action": "Fold"}},
            "turn": {"Cards": "Qh", "BB": {"Action": "Check"}, "BTN": {"Action": "Bet", "Amount": 9}},
            "river": {"Cards": "2c"},
        }
        folded_by_street = ActionQueueBuilder(per_street, "BB").folded_by_street
        assert folded_by_street[Street.PREFLOP] == folded("UTG", "HJ", "SB")
        assert folded_by_street[Street.FLOP] == folded("UTG", "HJ", "SB", "CO")
        streets = [Street.PREFLOP, Street.FLOP, Street.TURN, Street.RIVER]
        for earlier, later in zip(streets, streets[1:]):
            assert folded_by_street[earlier] <= folded_by_street[later]

    def test_folded_position_never_reappears(self):
        per_street = {
            "preflop": {"CO": {"Action": "Raise", "Amount": 2.5}, "BTN": {"Action": "Call"}, "BB": {"Action": "Call"}},
            "flop": {"Cards": "Ts9s2d", "BB": {"Action": "Bet", "Amount": 4}, "CO": {"Action": "Fold"}},
            "turn": {"Cards": "Qh", "BB": {"Action": "Check"}, "CO": {"Action": "Bet", "Amount": 9}},
        }
        queue = build_action_queue(per_street, "BB")
        seen_fold = set()
        for e in queue:
            if e.position is None:
                continue
            assert e.position not in seen_fold
            if e.action is ActionType.FOLD:
                seen_fold.add(e.position)

    def test_silent_seat_behind_aggressor_calls_bet(self):
        queue = build_action_queue(MULTI_STREET, "BB")
        assert summarize(queue)[-1] == ("BTN", "Call", 12)

    def test_builder_str(self):
        assert str(ActionQueueBuilder(MULTI_STREET, "BB")) == (
            "ActionQueueBuilder(hero='BB', streets=['preflop', 'flop', 'turn', 'river'])")


class TestSerialization:
    def test_to_dict_shapes(self):
        queue = build_action_queue(MULTI_STREET, "BB")
        assert queue[0].to_dict() == {"position": "SB", "action": "Post", "amount": 0.5, "isBoard": False}
        board = next(e for e in queue if e.is_board)
        assert board.to_dict() == {
            "position": "",
            "action": "Board",
            "amount": 0.0,
            "isBoard": True,
            "boardCards": "Ks7d2c",
        }

    def test_unrecognized_label_serializes_verbatim(self):
        queue = build_action_queue({"preflop": {"CO": {"Action": "Allin", "Amount": 100}}}, "CO")
        event = next(e for e in queue if e.position == Position.CO)
        assert event.action is ActionType.OTHER
        assert event.to_dict() == {"position": "CO", "action": "Allin", "amount": 100, "isBoard": False}
        assert str(event) == "CO Allin 100"
