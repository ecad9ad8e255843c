"""点数定义 - 斗地主15种点数（13种普通点数 + 大小王）"""

from enum import IntEnum
from typing import Tuple


class Rank(IntEnum):
    """点数枚举（数值即数组下标，数值越大牌越大）"""
    THREE = 0
    FOUR = 1
    FIVE = 2
    SIX = 3
    SEVEN = 4
    EIGHT = 5
    NINE = 6
    TEN = 7
    JACK = 8
    QUEEN = 9
    KING = 10
    ACE = 11
    TWO = 12
    BLACK_JOKER = 13
    RED_JOKER = 14

    @classmethod
    def from_index(cls, index: int) -> "Rank":
        """从 0~14 的下标还原点数"""
        if not 0 <= index < RANK_COUNT:
            raise ValueError(f"点数下标越界: {index}")
        return cls(index)

    @property
    def index(self) -> int:
        return int(self)

    @property
    def is_joker(self) -> bool:
        return self >= Rank.BLACK_JOKER

    @property
    def display(self) -> str:
        return RANK_DISPLAY[self]

    def __repr__(self) -> str:
        return f"Rank.{self.name}"


RANK_COUNT = 15

# 点数显示映射
RANK_DISPLAY = {
    Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "10", Rank.JACK: "J",
    Rank.QUEEN: "Q", Rank.KING: "K", Rank.ACE: "A",
    Rank.TWO: "2", Rank.BLACK_JOKER: "小王", Rank.RED_JOKER: "大王",
}

ORDINARY_RANKS: Tuple[Rank, ...] = tuple(r for r in Rank if not r.is_joker)
JOKERS: Tuple[Rank, ...] = (Rank.BLACK_JOKER, Rank.RED_JOKER)

# 顺子/连对/飞机只能由 3~A 组成，2 和大小王不参与连牌
CHAIN_RANKS: Tuple[Rank, ...] = tuple(r for r in Rank if r <= Rank.ACE)
