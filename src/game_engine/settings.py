from dataclasses import dataclass
from typing import Tuple

from behavioral.interpreter.hit_interpreter import HitKind


@dataclass(frozen=True)
class GameSettings:
    """Fixed configuration of the monster fight demo."""

    # Multiplies the final hit total for display
    weapon_power: int = 100

    # Monsters are spawned for indices 0..monster_count-1
    monster_count: int = 4

    # Width of the '=' / '-' separator lines
    separator_width: int = 50

    fight_hits: Tuple[HitKind, ...] = (
        HitKind.HARD,
        HitKind.HARD,
        HitKind.SOFT,
        HitKind.HARD,
        HitKind.SOFT,
    )


DEFAULT_SETTINGS = GameSettings()
