"""
character_prototype.py — Prototype for playable characters.

Characters are frozen value records; a "clone" is a copy with some fields
overridden, so a copy can never leak changes back into its template.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)

__all__ = [
    "CharacterKind",
    "Character",
    "clone",
    "describe",
    "default_roster",
    "list_characters",
]


class CharacterKind(Enum):
    """Closed set of character classes."""
    BERSERKER = auto()
    SIREN = auto()  # recharges health, shows the rate in its details


@dataclass(frozen=True, slots=True)
class Character:
    """
    Playable character record.

    :param kind: Character class; decides how the record is described.
    :param name: Display name.
    :param race: Race label.
    :param preferred_armor: Armor the character prefers.
    :param health_recharge_per_minute: Health regained per minute (sirens only).
    """
    kind: CharacterKind
    name: str
    race: str
    preferred_armor: str
    health_recharge_per_minute: int = 0


def clone(template: Character, **overrides: Any) -> Character:
    """
    Copies a template, overriding the given fields.

    :param template: Source character; left untouched.
    :param overrides: Field values for the copy.
    :return: A new Character.
    """
    return replace(template, **overrides)


def describe(character: Character) -> str:
    """Formats the one-line details of a character."""
    details = f"{character.name} - {character.race} - {character.preferred_armor}"
    if character.kind is CharacterKind.SIREN:
        details += f" - {character.health_recharge_per_minute} Health Per Min"
    return details


def default_roster() -> List[Character]:
    """
    Builds the playable characters: two templates and one clone of each.

    :return: Characters in display order.
    """
    brick = Character(CharacterKind.BERSERKER, name="Brick", race="Human",
                      preferred_armor="Breast Plate")
    mordecai = clone(brick, name="Mordecai", preferred_armor="Chainmail")

    lilith = Character(CharacterKind.SIREN, name="Lilith", race="Siren",
                       preferred_armor="Shield", health_recharge_per_minute=120)
    natasha = clone(lilith, name="Natasha", race="Super Siren")

    roster = [brick, mordecai, lilith, natasha]
    logger.debug("Roster built with %d characters", len(roster))
    return roster


def list_characters(roster: Iterable[Character]) -> List[str]:
    return [describe(c) for c in roster]
