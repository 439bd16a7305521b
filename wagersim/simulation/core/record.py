# wagersim/simulation/core/record.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wagersim.simulation.genetic import RandomSource


# bracket tag，core 不解释
Tier = str


class Winner(Enum):
    LEFT = "left"
    RIGHT = "right"

    def flip(self) -> "Winner":
        return Winner.RIGHT if self is Winner.LEFT else Winner.LEFT


class Mode(Enum):
    MATCHMAKING = "matchmaking"
    TOURNAMENT = "tournament"


@dataclass(frozen=True)
class Character:
    name: str
    bet_amount: float     # 该侧总下注池


@dataclass(frozen=True)
class Record:
    """
    Record (FROZEN)

    一场比赛的不可变事实：
      left / right : 双方名字 + 下注池
      winner       : LEFT / RIGHT
      tier         : bracket tag（opaque）
      mode         : MATCHMAKING / TOURNAMENT
      duration     : 比赛时长（秒，非负）
    """

    left: Character
    right: Character
    winner: Winner
    tier: Tier
    mode: Mode
    duration: float = 0.0
    date: float = 0.0

    @property
    def is_mirror(self) -> bool:
        return self.left.name == self.right.name

    def is_winner(self, name: str) -> bool:
        if self.winner is Winner.LEFT:
            return self.left.name == name
        return self.right.name == name

    def swapped(self) -> "Record":
        return replace(
            self,
            left=self.right,
            right=self.left,
            winner=self.winner.flip(),
        )

    def shuffle(self, rng: "RandomSource") -> "Record":
        """
        以 1/2 概率交换左右，消除记录时的位置偏差
        """
        if rng.coin():
            return self.swapped()
        return self
