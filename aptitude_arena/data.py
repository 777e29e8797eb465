"""
Game constants and display text for Aptitude Arena.

This module holds the category display names and the numbers that shape
play: how many levels exist, which are open from the start, how many
questions a level has and how answers are scored.
"""

from aptitude_arena.models import Category

# Display names shown on the dashboard
CATEGORY_NAMES: dict[str, str] = {
    Category.QUANTITATIVE.value: "Quantitative Aptitude",
    Category.LOGICAL.value: "Logical Reasoning",
    Category.VERBAL.value: "Verbal Reasoning",
    Category.NONVERBAL.value: "Non-Verbal Reasoning",
    Category.DATAVIS.value: "Data Visualization",
}

# ============================================================================
# Levels
# ============================================================================

# Levels per category on the level map and the dashboard
LEVELS_PER_CATEGORY = 50

# Levels 1..ALWAYS_UNLOCKED_LEVELS are playable without any progress
ALWAYS_UNLOCKED_LEVELS = 3

# Stars awarded for a completed level (no partial grading)
STARS_FOR_COMPLETION = 3

# ============================================================================
# Scoring
# ============================================================================

QUESTIONS_PER_LEVEL = 5

SECONDS_PER_QUESTION = 30

# A correct answer earns POINTS_PER_SECOND for every second left on the timer
POINTS_PER_SECOND = 10

# Points for a correct answer when the timer is switched off
UNTIMED_POINTS = 100

# Accuracy (percent) needed to move on to the next level
PASS_ACCURACY = 60
