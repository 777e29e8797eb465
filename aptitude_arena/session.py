"""
A single play-through of one level.

``GameSession`` walks through a question set, scores answers the way the
game screen does (time bonus with the timer on, a flat amount with it
off) and reports the result to the progress store when the last
question has been answered.
"""

import logging
from collections.abc import Sequence

from aptitude_arena import data
from aptitude_arena.errors import SessionStateError
from aptitude_arena.generators import generate_question_set
from aptitude_arena.identity import SessionContext
from aptitude_arena.models import GameProgress
from aptitude_arena.progress import ProgressStore
from aptitude_arena.questions import Question, round_half_up

logger = logging.getLogger(__name__)


def score_answer(is_correct: bool, time_left: int, timer_enabled: bool = True) -> int:
    """Points for one answer."""
    if not is_correct:
        return 0
    if not timer_enabled:
        return data.UNTIMED_POINTS
    return max(0, min(time_left, data.SECONDS_PER_QUESTION)) * data.POINTS_PER_SECOND


class GameSession:
    """Tracks answers and score while a level is being played."""

    def __init__(
        self,
        game_id: str,
        level: int,
        questions: Sequence[Question],
        timer_enabled: bool = True,
    ):
        if not questions:
            raise ValueError("A game session needs at least one question")
        self.game_id = game_id
        self.level = level
        self.questions = list(questions)
        self.timer_enabled = timer_enabled
        self.score = 0
        self.correct_answers = 0
        self._index = 0
        self._reported = False

    @property
    def question_number(self) -> int:
        """1-based number of the current question."""
        return self._index + 1

    @property
    def is_finished(self) -> bool:
        return self._index >= len(self.questions)

    @property
    def current_question(self) -> Question | None:
        if self.is_finished:
            return None
        return self.questions[self._index]

    @property
    def accuracy(self) -> int:
        """Percentage of questions answered correctly so far."""
        answered = min(self._index, len(self.questions))
        if answered == 0:
            return 0
        return round_half_up(self.correct_answers / answered * 100)

    @property
    def can_advance(self) -> bool:
        """Whether the result is good enough to offer the next level."""
        return (
            self.is_finished
            and self.accuracy >= data.PASS_ACCURACY
            and self.level < data.LEVELS_PER_CATEGORY
        )

    def answer(self, option_index: int, time_left: int = data.SECONDS_PER_QUESTION) -> bool:
        """
        Answer the current question and move on to the next one.

        Args:
            option_index: Index of the chosen option.
            time_left: Seconds left on the question timer.

        Returns:
            True if the answer was correct.

        Raises:
            SessionStateError: If every question has already been answered.
        """
        question = self.current_question
        if question is None:
            raise SessionStateError("All questions have already been answered")

        is_correct = question.check_answer(option_index)
        if is_correct:
            self.correct_answers += 1
            self.score += score_answer(True, time_left, self.timer_enabled)

        self._index += 1
        return is_correct

    def time_out(self) -> None:
        """The timer ran out: the current question counts as wrong."""
        if self.is_finished:
            raise SessionStateError("All questions have already been answered")
        self._index += 1

    def finish(self, store: ProgressStore, context: SessionContext) -> GameProgress:
        """
        Report the finished level to the progress store.

        Raises:
            SessionStateError: If questions are left or the result was
                already reported.
        """
        if not self.is_finished:
            raise SessionStateError(
                f"Cannot finish: question {self.question_number} of {len(self.questions)} is open"
            )
        if self._reported:
            raise SessionStateError("Session result was already reported")

        self._reported = True
        logger.info(
            f"Session finished: {self.game_id} level {self.level}, score={self.score}, "
            f"correct={self.correct_answers}/{len(self.questions)}"
        )
        return store.update_level_progress(
            context,
            self.game_id,
            self.level,
            self.score,
            self.correct_answers,
            len(self.questions),
        )


def start_session(
    game_id: str,
    level: int,
    count: int = data.QUESTIONS_PER_LEVEL,
    timer_enabled: bool = True,
) -> GameSession:
    """Generate a fresh question set and wrap it in a GameSession."""
    questions = generate_question_set(game_id, count, level)
    return GameSession(game_id, level, questions, timer_enabled=timer_enabled)
