"""
Data models for Aptitude Arena progress tracking.

This module defines the per-category progress record, the global user
statistics record, and the small value types returned to the presentation
layer. Every record converts to and from the camelCase documents kept in
the local cache and the remote store; ``from_dict`` validates the shape
and raises MalformedDocumentError instead of trusting the stored data.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from aptitude_arena.errors import MalformedDocumentError


class Category(Enum):
    """The five question categories, one progress record each."""

    QUANTITATIVE = "quantitative"
    LOGICAL = "logical"
    VERBAL = "verbal"
    NONVERBAL = "nonverbal"
    DATAVIS = "datavis"


GAME_IDS: list[str] = [category.value for category in Category]


def _count(data: dict, key: str) -> int:
    """Read a non-negative integer counter, accepting DynamoDB Decimals."""
    value = data.get(key, 0)
    if isinstance(value, bool):
        raise MalformedDocumentError(f"{key} must be a number, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise MalformedDocumentError(f"{key} must be a number, got {value!r}") from exc
    if number != value:
        raise MalformedDocumentError(f"{key} must be a whole number, got {value!r}")
    if number < 0:
        raise MalformedDocumentError(f"{key} must not be negative, got {number}")
    return number


@dataclass
class GameProgress:
    """
    Running totals for one category.

    ``levels_completed`` only ever grows; replaying a level adds to the
    counters but not to the set.
    """

    game_id: str
    levels_completed: set[int] = field(default_factory=set)
    total_score: int = 0
    total_games_played: int = 0
    correct_answers: int = 0
    total_questions: int = 0

    def record_level(
        self, level: int, score: int, correct_answers: int, total_questions: int
    ) -> None:
        """Add one finished attempt at ``level`` to the running totals."""
        self.levels_completed.add(level)
        self.total_score += score
        self.total_games_played += 1
        self.correct_answers += correct_answers
        self.total_questions += total_questions

    def to_dict(self) -> dict:
        """Convert to dictionary for persistence."""
        return {
            "gameId": self.game_id,
            "levelsCompleted": sorted(self.levels_completed),
            "totalScore": self.total_score,
            "totalGamesPlayed": self.total_games_played,
            "correctAnswers": self.correct_answers,
            "totalQuestions": self.total_questions,
        }

    @classmethod
    def from_dict(cls, data: dict, game_id: str | None = None) -> "GameProgress":
        """Create from a stored document, validating every field."""
        if not isinstance(data, dict):
            raise MalformedDocumentError(f"Progress record must be a mapping, got {data!r}")

        stored_id = data.get("gameId", game_id)
        if not isinstance(stored_id, str) or not stored_id:
            raise MalformedDocumentError(f"Invalid gameId: {stored_id!r}")

        levels = data.get("levelsCompleted", [])
        if not isinstance(levels, (list, tuple, set)):
            raise MalformedDocumentError(f"levelsCompleted must be a list, got {levels!r}")
        levels_completed = {_count({"level": level}, "level") for level in levels}

        progress = cls(
            game_id=stored_id,
            levels_completed=levels_completed,
            total_score=_count(data, "totalScore"),
            total_games_played=_count(data, "totalGamesPlayed"),
            correct_answers=_count(data, "correctAnswers"),
            total_questions=_count(data, "totalQuestions"),
        )
        if progress.correct_answers > progress.total_questions:
            raise MalformedDocumentError(
                f"correctAnswers ({progress.correct_answers}) exceeds "
                f"totalQuestions ({progress.total_questions}) for {stored_id}"
            )
        return progress


@dataclass
class UserStats:
    """Global statistics across all categories."""

    total_score: int = 0
    games_played: int = 0
    accuracy: int = 0  # Percentage 0-100
    current_streak: int = 0  # Consecutive days played
    best_streak: int = 0
    last_played_date: str = ""  # ISO day, "" means never played

    @property
    def last_played(self) -> date | None:
        """The last played day as a date, or None if never played."""
        if not self.last_played_date:
            return None
        return date.fromisoformat(self.last_played_date)

    def to_dict(self) -> dict:
        """Convert to dictionary for persistence."""
        return {
            "totalScore": self.total_score,
            "gamesPlayed": self.games_played,
            "accuracy": self.accuracy,
            "currentStreak": self.current_streak,
            "bestStreak": self.best_streak,
            "lastPlayedDate": self.last_played_date,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserStats":
        """Create from a stored document, validating every field."""
        if not isinstance(data, dict):
            raise MalformedDocumentError(f"Stats record must be a mapping, got {data!r}")

        last_played_date = data.get("lastPlayedDate", "") or ""
        if not isinstance(last_played_date, str):
            raise MalformedDocumentError(f"Invalid lastPlayedDate: {last_played_date!r}")
        if last_played_date:
            try:
                date.fromisoformat(last_played_date)
            except ValueError as exc:
                raise MalformedDocumentError(
                    f"Invalid lastPlayedDate: {last_played_date!r}"
                ) from exc

        stats = cls(
            total_score=_count(data, "totalScore"),
            games_played=_count(data, "gamesPlayed"),
            accuracy=_count(data, "accuracy"),
            current_streak=_count(data, "currentStreak"),
            best_streak=_count(data, "bestStreak"),
            last_played_date=last_played_date,
        )
        if stats.accuracy > 100:
            raise MalformedDocumentError(f"accuracy out of range: {stats.accuracy}")
        # Older records may carry a best streak that lags the current one
        stats.best_streak = max(stats.best_streak, stats.current_streak)
        return stats


@dataclass(frozen=True)
class LevelStatus:
    """Completion state of a single level."""

    is_completed: bool
    stars: int


@dataclass(frozen=True)
class LevelMapEntry:
    """One row of the level-selection screen."""

    level: int
    is_unlocked: bool
    is_completed: bool
    stars: int


@dataclass(frozen=True)
class DashboardEntry:
    """Per-category summary shown on the dashboard."""

    id: str
    name: str
    progress: int  # Percentage of levels completed
    completed: int
    total: int
    score: int


def initialize_progress() -> dict[str, GameProgress]:
    """Create a zeroed progress mapping with every known category present."""
    return {game_id: GameProgress(game_id=game_id) for game_id in GAME_IDS}
