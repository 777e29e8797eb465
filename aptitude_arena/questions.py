"""
Core question model and set builder for Aptitude Arena.

Every category generator produces ``Question`` instances through
``make_question`` and collects them into de-duplicated batches through
``build_question_set``.
"""

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from aptitude_arena.errors import QuestionPoolExhaustedError
from aptitude_arena.randomness import shuffle

logger = logging.getLogger(__name__)

# Number of options shown for every question
OPTION_COUNT = 4

# Single-question draws allowed per requested question before giving up
MAX_ATTEMPTS_PER_QUESTION = 20

# Re-perturbations allowed when a distractor collides with another option
MAX_DISTRACTOR_ATTEMPTS = 50


@dataclass(frozen=True)
class Question:
    """A single multiple-choice question."""

    id: str
    question: str
    options: tuple[str, ...]
    correct_answer: int  # Index into options
    explanation: str
    topic: str
    hint: str

    @property
    def correct_option(self) -> str:
        """The display string of the correct option."""
        return self.options[self.correct_answer]

    def check_answer(self, index: int) -> bool:
        """Check if the selected option index is the correct one."""
        return index == self.correct_answer

    def to_dict(self) -> dict:
        """Serialize for the presentation layer."""
        return {
            "id": self.id,
            "question": self.question,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
            "explanation": self.explanation,
            "topic": self.topic,
            "hint": self.hint,
        }


def make_question_id(prefix: str) -> str:
    """Generate an advisory unique id, e.g. ``perc-1760890000000-0.4821...``."""
    return f"{prefix}-{time.time_ns() // 1_000_000}-{random.random()}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded away from zero."""
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_number(value: float, digits: int = 0) -> str:
    """
    Format a number with a fixed number of decimals, rounding half up.

    Options are compared as strings, so every numeric answer and
    distractor goes through this before the distinctness check.
    """
    exponent = Decimal(1).scaleb(-digits)
    quantized = Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP)
    if quantized == 0:
        quantized = abs(quantized)
    return str(quantized)


def build_options(
    correct: str,
    distractors: list[str],
    perturb: Callable[[], str] | None = None,
) -> tuple[tuple[str, ...], int]:
    """
    Combine the correct value and three distractors into shuffled options.

    A distractor equal to the correct value or to an earlier distractor is
    replaced by calling ``perturb`` until it is distinct.

    Returns:
        Tuple of (options, index of the correct option).

    Raises:
        ValueError: If the options cannot be made distinct.
    """
    if len(distractors) != OPTION_COUNT - 1:
        raise ValueError(f"Expected {OPTION_COUNT - 1} distractors, got {len(distractors)}")

    chosen: list[str] = []
    for candidate in distractors:
        attempts = 0
        while candidate == correct or candidate in chosen:
            if perturb is None or attempts >= MAX_DISTRACTOR_ATTEMPTS:
                raise ValueError(f"Cannot build distinct options around {correct!r}")
            candidate = perturb()
            attempts += 1
        chosen.append(candidate)

    options = shuffle([correct, *chosen])
    return tuple(options), options.index(correct)


def make_question(
    prefix: str,
    prompt: str,
    correct: str,
    distractors: list[str],
    explanation: str,
    topic: str,
    hint: str,
    perturb: Callable[[], str] | None = None,
) -> Question:
    """Build a Question with shuffled, distinct options."""
    options, correct_index = build_options(correct, distractors, perturb)
    return Question(
        id=make_question_id(prefix),
        question=prompt,
        options=options,
        correct_answer=correct_index,
        explanation=explanation,
        topic=topic,
        hint=hint,
    )


def validate_request(count: int, level: int) -> None:
    """Reject question-set requests outside count >= 1, level >= 1."""
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if level < 1:
        raise ValueError(f"level must be at least 1, got {level}")


def build_question_set(
    category: str,
    generate: Callable[[int], Question],
    count: int,
    level: int = 1,
) -> list[Question]:
    """
    Generate ``count`` questions with pairwise-distinct prompt text.

    Duplicated prompts are rejected and redrawn. The number of draws is
    bounded by ``count * MAX_ATTEMPTS_PER_QUESTION``.

    Args:
        category: Category id, used for error reporting.
        generate: Single-question generator taking the level.
        count: Number of questions wanted.
        level: Level passed through to the generator.

    Returns:
        Exactly ``count`` questions.

    Raises:
        ValueError: If count or level is below 1.
        QuestionPoolExhaustedError: If the budget runs out first.
    """
    validate_request(count, level)

    questions: list[Question] = []
    used_prompts: set[str] = set()
    max_attempts = count * MAX_ATTEMPTS_PER_QUESTION

    for _ in range(max_attempts):
        question = generate(level)
        if question.question not in used_prompts:
            questions.append(question)
            used_prompts.add(question.question)
            if len(questions) == count:
                return questions

    logger.warning(
        f"Question pool exhausted: category={category}, requested={count}, "
        f"produced={len(questions)}, attempts={max_attempts}"
    )
    raise QuestionPoolExhaustedError(category, count, len(questions))
