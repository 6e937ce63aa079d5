"""
monster_fight.py — Text based monster fight demo.

Design patterns used:
  1) Singleton    — saving (GameLog)
  2) Prototype    — playable characters
  3) Adapter      — weapon listing
  4) Factory      — monsters
  5) Interpreter  — fight hits, with a magic "undo damage"

Game flow:
  1) Game start is saved (initial save)
  2) Playable characters are listed
  3) Weapons are listed
  4) Game selections are saved (settings save)
  5) Monsters are created
  6) A fight runs; the hit total is multiplied by the weapon power
  7) Magic undoes the fight's damage
  8) Fight results are saved
"""

from __future__ import annotations

import logging
from typing import Callable

from behavioral.interpreter.hit_interpreter import HitPower, HitSequence
from creational.factory.monster_factory import list_monsters, spawn_monsters
from creational.prototype.character_prototype import default_roster, list_characters
from creational.singleton.game_log import GameLog
from game_engine.settings import DEFAULT_SETTINGS, GameSettings
from structural.adapter.weapon_adapter import WeaponAdapter, WeaponListingSystem

logger = logging.getLogger(__name__)

__all__ = ["run", "main"]


def _section(title: str, width: int, echo: Callable[[str], None]) -> None:
    echo('=' * width)
    echo(f"==> {title} <==")
    echo('-' * width)


def run(log: GameLog, settings: GameSettings = DEFAULT_SETTINGS,
        echo: Callable[[str], None] = print) -> int:
    """
    Plays the whole demo once.

    :param log: Game log used for the three saves.
    :param settings: Demo configuration.
    :param echo: Line sink for the narrative (default: print).
    :return: Displayed damage after the magic undo (0 for a full undo).
    """
    width = settings.separator_width

    log.write("Initial Save")

    _section("Playable Characters", width, echo)
    for line in list_characters(default_roster()):
        echo(line)

    echo('=' * width)
    WeaponListingSystem(WeaponAdapter(), separator_width=width).show(echo)

    log.write("Save Settings")

    _section("Monsters", width, echo)
    for line in list_monsters(spawn_monsters(settings.monster_count)):
        echo(line)

    _section("Fight Results", width, echo)
    damage = HitPower()
    hits = HitSequence(settings.fight_hits)
    hits.interpret(damage, echo=echo)
    echo(f"Damage: {damage.number * settings.weapon_power}")
    logger.info("Fight dealt %d hit points", damage.number)

    echo('-' * width)
    echo("Calling Magic 'Undo Damage'")
    echo('-' * width)

    hits = hits.reversed()
    hits.interpret(damage, undo=True, echo=echo)
    final_damage = damage.number * settings.weapon_power
    echo(f"Damage: {final_damage}")

    echo('=' * width)
    log.write("Save Fight Results")
    echo('-' * width)
    return final_damage


def main() -> int:
    logging.basicConfig(level=logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run(GameLog.get_instance())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
