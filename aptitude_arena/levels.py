"""Level-unlock policy: which levels are playable and which are done."""

from aptitude_arena import data
from aptitude_arena.models import GameProgress, LevelMapEntry, LevelStatus


def is_level_unlocked(progress: dict[str, GameProgress], game_id: str, level: int) -> bool:
    """
    Check if a level is playable.

    The first levels are always open; every later level opens once the
    level before it has been completed.
    """
    if level <= data.ALWAYS_UNLOCKED_LEVELS:
        return True

    game_progress = progress.get(game_id)
    if game_progress is None:
        return False

    return (level - 1) in game_progress.levels_completed


def get_level_status(progress: dict[str, GameProgress], game_id: str, level: int) -> LevelStatus:
    """Completion flag and stars for a level. Completed levels always get full stars."""
    game_progress = progress.get(game_id)
    if game_progress is None or level not in game_progress.levels_completed:
        return LevelStatus(is_completed=False, stars=0)
    return LevelStatus(is_completed=True, stars=data.STARS_FOR_COMPLETION)


def get_level_map(
    progress: dict[str, GameProgress],
    game_id: str,
    level_count: int = data.LEVELS_PER_CATEGORY,
) -> list[LevelMapEntry]:
    """Unlock and completion state of levels 1..level_count for the level-selection screen."""
    entries = []
    for level in range(1, level_count + 1):
        status = get_level_status(progress, game_id, level)
        entries.append(
            LevelMapEntry(
                level=level,
                is_unlocked=is_level_unlocked(progress, game_id, level),
                is_completed=status.is_completed,
                stars=status.stars,
            )
        )
    return entries
