"""Unit tests for global statistics and the daily streak."""

from datetime import date, timedelta

import pytest

from aptitude_arena.models import GameProgress, UserStats
from aptitude_arena.stats import advance_streak, compute_accuracy


class TestComputeAccuracy:
    """Tests for compute_accuracy."""

    def test_no_questions(self):
        assert compute_accuracy({"logical": GameProgress(game_id="logical")}) == 0
        assert compute_accuracy({}) == 0

    def test_across_categories(self):
        progress = {
            "logical": GameProgress(game_id="logical", correct_answers=3, total_questions=5),
            "verbal": GameProgress(game_id="verbal", correct_answers=2, total_questions=5),
        }
        assert compute_accuracy(progress) == 50

    def test_rounds_half_up(self):
        progress = {"logical": GameProgress(game_id="logical", correct_answers=1, total_questions=8)}
        # 12.5 -> 13
        assert compute_accuracy(progress) == 13


class TestAdvanceStreak:
    """Tests for the streak rules."""

    def test_first_play(self):
        stats = advance_streak(UserStats(), date(2025, 3, 10))
        assert (stats.current_streak, stats.best_streak) == (1, 1)
        assert stats.last_played_date == "2025-03-10"

    def test_first_play_keeps_higher_best(self):
        stats = advance_streak(UserStats(best_streak=6), date(2025, 3, 10))
        assert (stats.current_streak, stats.best_streak) == (1, 6)

    def test_same_day_unchanged(self):
        stats = UserStats(current_streak=3, best_streak=4, last_played_date="2025-03-10")
        advance_streak(stats, date(2025, 3, 10))
        assert (stats.current_streak, stats.best_streak) == (3, 4)

    def test_next_day_extends(self):
        stats = UserStats(current_streak=4, best_streak=4, last_played_date="2025-02-28")
        advance_streak(stats, date(2025, 3, 1))
        assert (stats.current_streak, stats.best_streak) == (5, 5)
        assert stats.last_played_date == "2025-03-01"

    def test_gap_resets(self):
        stats = UserStats(current_streak=4, best_streak=4, last_played_date="2025-03-10")
        advance_streak(stats, date(2025, 3, 12))
        assert (stats.current_streak, stats.best_streak) == (1, 4)
        assert stats.last_played_date == "2025-03-12"

    def test_clock_moved_back_is_ignored(self):
        stats = UserStats(current_streak=2, best_streak=3, last_played_date="2025-03-10")
        advance_streak(stats, date(2025, 3, 8))
        assert (stats.current_streak, stats.best_streak) == (2, 3)
        assert stats.last_played_date == "2025-03-10"


class TestStatsEngine:
    """Tests for StatsEngine.update_user_stats."""

    def test_streak_over_several_days(self, stats_engine, clock, context):
        """Day 1 starts the streak, day 2 extends it, day 4 breaks it."""
        stats = stats_engine.update_user_stats(context, 100)
        assert (stats.current_streak, stats.best_streak) == (1, 1)

        clock.today += timedelta(days=1)
        stats = stats_engine.update_user_stats(context, 100)
        assert (stats.current_streak, stats.best_streak) == (2, 2)

        clock.today += timedelta(days=2)
        stats = stats_engine.update_user_stats(context, 100)
        assert (stats.current_streak, stats.best_streak) == (1, 2)

    def test_totals_accumulate(self, stats_engine, context):
        stats_engine.update_user_stats(context, 120)
        stats = stats_engine.update_user_stats(context, 80)

        assert stats.total_score == 200
        assert stats.games_played == 2
        assert stats_engine.get_user_stats(context) == stats

    def test_same_day_plays_keep_streak(self, stats_engine, context):
        stats_engine.update_user_stats(context, 10)
        stats = stats_engine.update_user_stats(context, 10)
        assert stats.current_streak == 1

    def test_accuracy_from_given_progress(self, stats_engine, context):
        progress = {
            "logical": GameProgress(game_id="logical", correct_answers=3, total_questions=5),
            "verbal": GameProgress(game_id="verbal", correct_answers=2, total_questions=5),
        }
        stats = stats_engine.update_user_stats(context, 0, progress)
        assert stats.accuracy == 50

    def test_accuracy_loaded_when_progress_omitted(self, stats_engine, persistence, context):
        persistence.save_game_progress(
            context,
            {"logical": GameProgress(game_id="logical", correct_answers=4, total_questions=5)},
        )
        assert stats_engine.update_user_stats(context, 0).accuracy == 80

    def test_clock_skew_leaves_streak_alone(self, stats_engine, clock, context):
        stats_engine.update_user_stats(context, 10)
        clock.today -= timedelta(days=3)

        stats = stats_engine.update_user_stats(context, 10)

        assert stats.current_streak == 1
        assert stats.last_played_date == "2025-03-10"
        assert stats.games_played == 2

    @pytest.mark.parametrize("score", [0, 500])
    def test_save_user_stats(self, stats_engine, context, score):
        stats_engine.save_user_stats(context, UserStats(total_score=score))
        assert stats_engine.get_user_stats(context).total_score == score
