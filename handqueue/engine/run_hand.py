import argparse
import json
import logging
import sys

from .action_queue import build_action_queue
from .hand_loader import load_hand
from .logger import set_level
from .observation import encode_action_queue
from .replay import TableReplay


def format_queue(queue) -> str:
    lines = []
    replay = TableReplay(queue)
    while not replay.at_end:
        event = replay.step_forward()
        lines.append(f"{replay.index + 1:>3}. {str(event):<24} pot={replay.total_pot:g}")
    return "\n".join(lines)


def format_features(queue) -> str:
    """One whitespace-separated feature row per event."""
    return "\n".join(" ".join(f"{v:g}" for v in row) for row in encode_action_queue(queue))


def run_hand(path: str, hero: str | None = None, as_json: bool = False, as_features: bool = False) -> str:
    """Load a hand record and render its rebuilt action queue."""
    hand = load_hand(path)
    queue = build_action_queue(hand["action"], hero or hand["hero"])
    if as_features:
        return format_features(queue)
    if as_json:
        return json.dumps([e.to_dict() for e in queue], indent=2)
    return format_queue(queue)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Rebuild and print the action queue of a recorded hand.")
    parser.add_argument("path", help="JSON hand record")
    parser.add_argument("--hero", default=None, help="Override the hero position (e.g. BTN)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the queue as JSON")
    output.add_argument("--features", action="store_true", help="Print the encoded feature matrix")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log inferred actions")
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    try:
        print(run_hand(args.path, hero=args.hero, as_json=args.json, as_features=args.features))
    except (OSError, ValueError) as e:
        print(f"Could not replay {args.path}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
