from .config import DOORS_NUMBER

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(slots=True)
class Door:
    """State of a single door during one trial."""

    has_car: bool = False
    is_selected: bool = False  # currently chosen by the player
    is_open: bool = False  # revealed by the host, never the car nor the selection


Board = list[Door]


def new_board(n_doors: int = DOORS_NUMBER) -> Board:
    """Returns a fresh board of closed, unselected, empty doors."""
    return [Door() for _ in range(n_doors)]


class Strategy(Enum):
    """What the player does once the host has opened a door."""

    STAY = "stay"
    SWITCH = "switch"

    @classmethod
    def from_flag(cls, switch_strategy: bool) -> "Strategy":
        return cls.SWITCH if switch_strategy else cls.STAY

    @property
    def switches(self) -> bool:
        return self is Strategy.SWITCH


class Phase(Enum):
    """Progress phase of a trial, in the order they happen."""

    CAR_PLACEMENT = auto()
    PLAYER_INITIAL_PICK = auto()
    HOST_REVEAL = auto()
    OPTIONAL_SWITCH = auto()
    RESOLVE = auto()
