"""Hidden states and observations of the tiger domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def other(self) -> Side:
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


@dataclass(frozen=True, slots=True)
class TigerState:
    """Hidden state: where the tiger is, and which door (if any) was opened.

    A door is only ever set by an open action, so ``opened`` doubles as the
    record that the episode's last action was an open.
    """

    tiger: Side
    opened: Side | None = None

    def __str__(self) -> str:
        name = f"Tiger{self.tiger.value.capitalize()}"
        if self.opened is not None:
            name += f"[opened={self.opened.value}]"
        return name


class TigerObservation(Enum):
    """What the agent perceives after acting."""

    HEAR_LEFT = "hear_left"
    HEAR_RIGHT = "hear_right"
    OPENED_DOOR = "opened_door"

    @classmethod
    def hearing(cls, side: Side) -> TigerObservation:
        return cls.HEAR_LEFT if side is Side.LEFT else cls.HEAR_RIGHT
