"""
hit_interpreter.py — Interpreter for fight hits with a "magic undo".

A fight is an ordered sequence of hit expressions. Interpreting a hit adds its
fixed magnitude to a shared damage accumulator; interpreting it in undo mode
adds the negated magnitude. Undoing a fight means interpreting the reversed
sequence in undo mode, which brings the accumulator back to where it started.

Python 3.11+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Tuple

logger = logging.getLogger(__name__)

__all__ = [
    "HitKind",
    "HitPower",
    "HitSequence",
    "interpret",
]


# ----------------------------- Domain ----------------------------------- #
class HitKind(Enum):
    """
    Closed set of hit expressions.

    :ivar magnitude: Damage added by one forward hit.
    :ivar label: Text echoed whenever the hit is interpreted (forward or undo).
    """
    HARD = (10, "Hard Hit x10")
    SOFT = (2, "Soft Hit x2")

    def __init__(self, magnitude: int, label: str) -> None:
        self.magnitude = magnitude
        self.label = label


@dataclass(slots=True)
class HitPower:
    """
    Mutable damage accumulator shared by all hits of one fight.

    :param number: Signed running total of applied hit deltas.
    """
    number: int = 0


# --------------------------- Interpretation ----------------------------- #
def interpret(kind: HitKind, damage: HitPower, undo: bool = False,
              echo: Callable[[str], None] = print) -> None:
    """
    Interprets one hit against the accumulator.

    :param kind: Hit to apply.
    :param damage: Accumulator mutated in place.
    :param undo: When True the hit's magnitude is subtracted instead of added.
    :param echo: Line sink for the hit label (default: print).
    """
    delta = kind.magnitude
    if undo:
        delta *= -1
    echo(kind.label)
    damage.number += delta
    logger.debug("%s applied (undo=%s), damage now %d", kind.name, undo, damage.number)


class HitSequence:
    """
    Ordered, immutable list of hits making up one fight.

    :param hits: Hits in application (and display) order.
    """

    def __init__(self, hits: Iterable[HitKind] = ()) -> None:
        self._hits: Tuple[HitKind, ...] = tuple(hits)

    @property
    def hits(self) -> Tuple[HitKind, ...]:
        return self._hits

    def __iter__(self) -> Iterator[HitKind]:
        return iter(self._hits)

    def __len__(self) -> int:
        return len(self._hits)

    def __repr__(self) -> str:
        return f"HitSequence({[h.name for h in self._hits]})"

    def reversed(self) -> "HitSequence":
        """
        :return: A new sequence with the same hits in reverse order.
        """
        return HitSequence(reversed(self._hits))

    def interpret(self, damage: HitPower, undo: bool = False,
                  echo: Callable[[str], None] = print) -> HitPower:
        """
        Interprets every hit left to right against one accumulator.

        :param damage: Accumulator mutated in place.
        :param undo: Apply every hit with its negated magnitude.
        :param echo: Line sink for hit labels.
        :return: The same accumulator, for chaining.
        """
        for kind in self._hits:
            interpret(kind, damage, undo=undo, echo=echo)
        return damage
