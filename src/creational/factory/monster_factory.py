__author__ = 'Mihail Mihaylov'

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

logger = logging.getLogger(__name__)


class MonsterKind(Enum):
    GUARDIAN = "Guardian"
    BANDIT = "Bandit"
    SPIDER = "Spider"

    @property
    def title(self) -> str:
        return self.value


def resolve(index: int) -> MonsterKind:
    """
    Maps a spawn index to a monster kind.

    Any index other than 0, 1 or 2 (negatives included) gives a Spider.
    """
    if index == 0:
        kind = MonsterKind.GUARDIAN
    elif index in (1, 2):
        kind = MonsterKind.BANDIT
    else:
        kind = MonsterKind.SPIDER
    logger.debug("Index %d resolved to %s", index, kind.title)
    return kind


@dataclass(frozen=True)
class Monster:
    kind: MonsterKind

    @property
    def title(self) -> str:
        return self.kind.title


class MonsterFactory:
    @staticmethod
    def get(index: int) -> Monster:
        return Monster(resolve(index))


def spawn_monsters(count: int) -> List[Monster]:
    return [MonsterFactory.get(i) for i in range(count)]


def list_monsters(monsters: Iterable[Monster]) -> List[str]:
    return [f' #{i + 1} - {m.title}' for i, m in enumerate(monsters)]
