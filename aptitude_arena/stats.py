"""
Global statistics and the daily play streak.

The streak counts consecutive local calendar days with at least one
finished level:

- Same day as the last play: unchanged
- First play ever: current and best streak become 1
- The day after the last play: current streak grows, best follows it
- Two or more days later: current streak restarts at 1
- A date before the last play (clock moved back): ignored
"""

import logging
from collections.abc import Callable
from datetime import date

from aptitude_arena.identity import SessionContext
from aptitude_arena.models import GameProgress, UserStats
from aptitude_arena.persistence import PersistenceManager
from aptitude_arena.questions import round_half_up

logger = logging.getLogger(__name__)


def compute_accuracy(progress: dict[str, GameProgress]) -> int:
    """Overall percentage of correct answers across all categories, 0 if none."""
    correct = sum(record.correct_answers for record in progress.values())
    total = sum(record.total_questions for record in progress.values())
    if total == 0:
        return 0
    return round_half_up(correct / total * 100)


def advance_streak(stats: UserStats, today: date) -> UserStats:
    """
    Apply one play on ``today`` to the streak fields of ``stats`` in place.

    Returns:
        The same UserStats instance.
    """
    today_str = today.isoformat()
    last_played = stats.last_played

    if last_played is None:
        stats.current_streak = 1
        stats.best_streak = max(stats.best_streak, 1)
    elif last_played == today:
        return stats
    else:
        days = (today - last_played).days
        if days < 0:
            logger.warning(
                f"Ignoring play dated {today_str}, before last play {stats.last_played_date}"
            )
            return stats
        if days == 1:
            stats.current_streak += 1
            stats.best_streak = max(stats.best_streak, stats.current_streak)
        else:
            logger.info(f"Streak of {stats.current_streak} broken after {days} days")
            stats.current_streak = 1

    stats.last_played_date = today_str
    return stats


class StatsEngine:
    """Recomputes the global UserStats record after every finished level."""

    def __init__(
        self,
        persistence: PersistenceManager,
        today: Callable[[], date] = date.today,
    ):
        """
        Args:
            persistence: Storage for the stats and progress records.
            today: Clock returning the current local calendar day.
        """
        self._persistence = persistence
        self._today = today

    def get_user_stats(self, context: SessionContext) -> UserStats:
        """The stored global statistics, or a zero-valued record."""
        return self._persistence.get_user_stats(context)

    def save_user_stats(self, context: SessionContext, stats: UserStats) -> None:
        """Persist ``stats`` without folding in a new play."""
        self._persistence.save_user_stats(context, stats)

    def update_user_stats(
        self,
        context: SessionContext,
        score: int,
        progress: dict[str, GameProgress] | None = None,
    ) -> UserStats:
        """
        Fold one finished level into the global statistics and save them.

        Args:
            context: Session context carrying the user id.
            score: Score of the finished level.
            progress: Current progress mapping; loaded from storage if omitted.

        Returns:
            The updated UserStats.
        """
        stats = self._persistence.get_user_stats(context)

        stats.total_score += score
        stats.games_played += 1

        if progress is None:
            progress = self._persistence.get_game_progress(context)
        stats.accuracy = compute_accuracy(progress)

        advance_streak(stats, self._today())

        self._persistence.save_user_stats(context, stats)
        logger.info(
            f"Stats updated: total_score={stats.total_score}, "
            f"games_played={stats.games_played}, accuracy={stats.accuracy}, "
            f"streak={stats.current_streak}/{stats.best_streak}"
        )
        return stats
