from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

__all__ = [
    "WeaponRow",
    "LegacyArsenal",
    "WeaponSource",
    "WeaponAdapter",
    "WeaponListingSystem",
]

# ==========================
# Module: weapon_adapter
# Purpose: Adapt the arsenal's raw weapon rows to the listing interface
#          the game screens expect (list of display lines).
# ==========================

WeaponRow = Tuple[str, str, str]  # (weapon, character, condition)


class LegacyArsenal:
    """
    Adaptee: exposes weapons as raw rows only.
    """

    _WEAPONS: Tuple[WeaponRow, ...] = (
        ("Shotgun", "Berserker", "New"),
        ("Sword", "Siren", "Used"),
    )

    def get_weapons(self) -> Tuple[WeaponRow, ...]:
        """
        :return: The fixed weapon table as (weapon, character, condition) rows.
        """
        return self._WEAPONS


class WeaponSource(ABC):
    """
    Target interface: anything that can list weapons as display lines.
    """

    @abstractmethod
    def get_weapon_list(self) -> List[str]:
        """
        :return: One display line per weapon, in table order.
        """


class WeaponAdapter(WeaponSource):
    """
    Adapts a LegacyArsenal to WeaponSource.

    :param arsenal: Adaptee; a default LegacyArsenal is used when omitted.
    """

    def __init__(self, arsenal: Optional[LegacyArsenal] = None) -> None:
        self._arsenal = arsenal or LegacyArsenal()

    def get_weapon_list(self) -> List[str]:
        lines = [f"{weapon}\t for {character}\t{condition} condition"
                 for weapon, character, condition in self._arsenal.get_weapons()]
        logger.debug("Adapted %d weapon rows", len(lines))
        return lines


class WeaponListingSystem:
    """
    Client of WeaponSource; prints the weapon choices screen.

    :param source: Any WeaponSource implementation.
    :param separator_width: Width of the closing '-' line.
    """

    def __init__(self, source: WeaponSource, separator_width: int = 50) -> None:
        self._source = source
        self._separator_width = separator_width

    def show(self, echo: Callable[[str], None] = print) -> None:
        """
        Prints header, weapon lines and a separator.

        :param echo: Line sink (default: print).
        """
        echo("==> Weapon Choices <==")
        for line in self._source.get_weapon_list():
            echo(line)
        echo('-' * self._separator_width)
