"""
Progress store for Aptitude Arena.

``ProgressStore`` owns the per-category progress records and the global
stats record. Finishing a level goes through ``update_level_progress``,
which updates the category, persists it and then refreshes the global
statistics. Updates for the same user are serialized so that two quick
submissions cannot overwrite each other's increments.
"""

import logging
import threading

from aptitude_arena import data, levels
from aptitude_arena.identity import SessionContext
from aptitude_arena.models import (
    DashboardEntry,
    GameProgress,
    LevelMapEntry,
    LevelStatus,
    UserStats,
)
from aptitude_arena.persistence import PersistenceManager
from aptitude_arena.questions import round_half_up
from aptitude_arena.stats import StatsEngine

logger = logging.getLogger(__name__)


class ProgressStore:
    """Durable category progress plus the stats derived from it."""

    def __init__(self, persistence: PersistenceManager, stats_engine: StatsEngine | None = None):
        """
        Args:
            persistence: Dual-backend storage for progress and stats.
            stats_engine: Engine refreshing the global stats; a default one
                sharing ``persistence`` is created if omitted.
        """
        self._persistence = persistence
        self._stats_engine = stats_engine or StatsEngine(persistence)
        # Never pruned: one lock per user id seen by this process, and a
        # client process serves a single signed-in user.
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _user_lock(self, context: SessionContext) -> threading.Lock:
        """One lock per user; signed-out sessions share the local lock."""
        with self._locks_guard:
            return self._locks.setdefault(context.user_id or "", threading.Lock())

    def get_all_game_progress(self, context: SessionContext) -> dict[str, GameProgress]:
        """Progress for every category, remote first, local cache as fallback."""
        return self._persistence.get_game_progress(context)

    def save_game_progress(
        self, context: SessionContext, progress: dict[str, GameProgress]
    ) -> None:
        """Persist the full progress mapping."""
        self._persistence.save_game_progress(context, progress)

    def update_level_progress(
        self,
        context: SessionContext,
        game_id: str,
        level: int,
        score: int,
        correct_answers: int,
        total_questions: int,
    ) -> GameProgress:
        """
        Record a finished level and refresh the global statistics.

        Completing a level again adds to the running totals but does not
        duplicate the level in ``levels_completed``.

        Args:
            context: Session context carrying the user id.
            game_id: Category id.
            level: Level that was finished.
            score: Score earned in this attempt.
            correct_answers: Correct answers in this attempt.
            total_questions: Questions asked in this attempt.

        Returns:
            The updated GameProgress of the category.

        Raises:
            ValueError: If the numbers are negative or inconsistent.
        """
        if level < 1:
            raise ValueError(f"level must be at least 1, got {level}")
        if score < 0 or correct_answers < 0 or total_questions < 0:
            raise ValueError("score and answer counts must not be negative")
        if correct_answers > total_questions:
            raise ValueError(
                f"correct_answers ({correct_answers}) exceeds total_questions ({total_questions})"
            )

        with self._user_lock(context):
            all_progress = self._persistence.get_game_progress(context)

            game_progress = all_progress.get(game_id)
            if game_progress is None:
                game_progress = GameProgress(game_id=game_id)
                all_progress[game_id] = game_progress

            first_completion = level not in game_progress.levels_completed
            game_progress.record_level(level, score, correct_answers, total_questions)
            logger.info(
                f"Level {level} of {game_id} finished: score={score}, "
                f"correct={correct_answers}/{total_questions}, first_completion={first_completion}"
            )

            self._persistence.save_game_progress(context, all_progress)
            self._stats_engine.update_user_stats(context, score, all_progress)

        return game_progress

    def get_user_stats(self, context: SessionContext) -> UserStats:
        """The global statistics record."""
        return self._stats_engine.get_user_stats(context)

    def get_game_progress_for_dashboard(self, context: SessionContext) -> list[DashboardEntry]:
        """One summary per category for the dashboard."""
        total = data.LEVELS_PER_CATEGORY
        entries = []
        for game_id, progress in self.get_all_game_progress(context).items():
            completed = len(progress.levels_completed)
            entries.append(
                DashboardEntry(
                    id=game_id,
                    name=data.CATEGORY_NAMES.get(game_id, game_id),
                    progress=min(100, round_half_up(completed / total * 100)),
                    completed=completed,
                    total=total,
                    score=progress.total_score,
                )
            )
        return entries

    def is_level_unlocked(self, context: SessionContext, game_id: str, level: int) -> bool:
        """Check whether ``level`` of ``game_id`` is playable right now."""
        return levels.is_level_unlocked(self.get_all_game_progress(context), game_id, level)

    def get_level_status(self, context: SessionContext, game_id: str, level: int) -> LevelStatus:
        """Completion state and stars of a level."""
        return levels.get_level_status(self.get_all_game_progress(context), game_id, level)

    def get_level_map(
        self,
        context: SessionContext,
        game_id: str,
        level_count: int = data.LEVELS_PER_CATEGORY,
    ) -> list[LevelMapEntry]:
        """All level rows for a category from a single progress read."""
        return levels.get_level_map(self.get_all_game_progress(context), game_id, level_count)
