"""
Daily spot payload.

A stored puzzle carries the sparse hand record plus the question asked at
the hero's decision point. This module turns it into the flat payload a quiz
or replay consumer needs, with the action queue already rebuilt.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .action_data import HandActionEvent
from .action_queue import build_action_queue
from .enums import Street
from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_EFFECTIVE_STACKS = 100


@dataclass(frozen=True)
class DailySpot:
    hero: str
    hero_cards: str
    action_queue: tuple[HandActionEvent, ...]
    decision_street: Street = Street.PREFLOP
    question_text: str = ""
    answer_options: list[str] = field(default_factory=list)
    correct_answer: str = ""
    correct_explanation: str = ""
    correct_frequency: float = 0
    effective_stacks: float = DEFAULT_EFFECTIVE_STACKS
    flavor_text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "hero": self.hero,
            "heroCards": self.hero_cards,
            "questionText": self.question_text,
            "answerOptions": list(self.answer_options),
            "correctAnswer": self.correct_answer,
            "correctExplanation": self.correct_explanation,
            "correctFrequency": self.correct_frequency,
            "actionQueue": [e.to_dict() for e in self.action_queue],
            "effectiveStacks": self.effective_stacks,
            "decisionStreet": self.decision_street.value,
            "flavorText": self.flavor_text,
        }


def decision_street_from_tags(tags: Any) -> Street:
    """The latest street named in the tags, preflop if none is."""
    if not isinstance(tags, (list, tuple, set, frozenset)):
        return Street.PREFLOP
    for street in (Street.RIVER, Street.TURN, Street.FLOP):
        if street.value in tags:
            return street
    return Street.PREFLOP


def hero_cards_from_action(action: Any, hero: str) -> str:
    """The hero's hole cards, recorded on the hero's preflop entry."""
    if not isinstance(action, Mapping):
        return ""
    preflop = action.get(Street.PREFLOP.value)
    if not isinstance(preflop, Mapping):
        return ""
    entry = preflop.get(hero)
    if isinstance(entry, Mapping) and isinstance(entry.get("Cards"), str):
        return entry["Cards"]
    return ""


def build_spot(puzzle: Mapping[str, Any]) -> DailySpot:
    """
    Build the consumer payload for a stored puzzle document.

    Args:
        puzzle: Puzzle document with Hero, Action, Tags, CorrectAnswers, ...

    Returns:
        DailySpot with the rebuilt action queue

    Raises:
        ValueError: If the puzzle is not a mapping
    """
    if not isinstance(puzzle, Mapping):
        raise ValueError(f"Puzzle must be a mapping, got {type(puzzle).__name__}")

    hero = puzzle.get("Hero") or ""
    action = puzzle.get("Action") or {}
    if not hero:
        logger.warning("Puzzle has no hero position, replay will not stop at a decision")

    correct_answers = puzzle.get("CorrectAnswers") or []
    correct_answer = correct_answers[0] if correct_answers else ""
    frequencies = puzzle.get("ActionFrequencies")
    if not isinstance(frequencies, Mapping):
        frequencies = {}
    explanations = puzzle.get("Explanations")
    if not isinstance(explanations, Mapping):
        explanations = {}

    return DailySpot(
        hero=hero,
        hero_cards=hero_cards_from_action(action, hero),
        action_queue=build_action_queue(action, hero),
        decision_street=decision_street_from_tags(puzzle.get("Tags") or []),
        question_text=puzzle.get("QuestionText") or "",
        answer_options=list(puzzle.get("AnswerOptions") or []),
        correct_answer=correct_answer,
        correct_explanation=explanations.get(correct_answer) or "",
        correct_frequency=frequencies.get(correct_answer, 0),
        effective_stacks=puzzle.get("EffectiveStacks") or DEFAULT_EFFECTIVE_STACKS,
        flavor_text=puzzle.get("FlavorText") or None,
    )
