"""Question generators, one module per category."""

import logging
from collections.abc import Callable

from aptitude_arena.generators.datavis import generate_datavis_question_set
from aptitude_arena.generators.logical import generate_logical_question_set
from aptitude_arena.generators.nonverbal import generate_nonverbal_question_set
from aptitude_arena.generators.quantitative import generate_quantitative_question_set
from aptitude_arena.generators.verbal import generate_verbal_question_set
from aptitude_arena.models import Category
from aptitude_arena.questions import Question

logger = logging.getLogger(__name__)

# Map category ids to their set builders
QUESTION_SET_GENERATORS: dict[str, Callable[[int, int], list[Question]]] = {
    Category.QUANTITATIVE.value: generate_quantitative_question_set,
    Category.LOGICAL.value: generate_logical_question_set,
    Category.VERBAL.value: generate_verbal_question_set,
    Category.NONVERBAL.value: generate_nonverbal_question_set,
    Category.DATAVIS.value: generate_datavis_question_set,
}


def generate_question_set(game_id: str, count: int, level: int = 1) -> list[Question]:
    """
    Generate a question set for the given category.

    Unknown category ids fall back to quantitative questions.

    Args:
        game_id: Category id, e.g. "verbal".
        count: Number of distinct questions wanted.
        level: Level being played.

    Returns:
        Exactly ``count`` questions.
    """
    generator = QUESTION_SET_GENERATORS.get(game_id)
    if generator is None:
        logger.warning(f"Unknown category {game_id!r}, using quantitative questions")
        generator = generate_quantitative_question_set
    return generator(count, level)


__all__ = [
    "QUESTION_SET_GENERATORS",
    "generate_question_set",
    "generate_quantitative_question_set",
    "generate_logical_question_set",
    "generate_verbal_question_set",
    "generate_nonverbal_question_set",
    "generate_datavis_question_set",
]
