"""出牌 - 经过校验的一手牌（牌型 + 具体点数），不可变"""

from dataclasses import InitVar, dataclass
from typing import Tuple

from .comparator import compare, partial_compare
from .counts import Counts
from .hand_type import PlayKind
from .rank import Rank, RANK_COUNT

# 只有牌型识别和枚举器持有该令牌，外部无法直接构造 Play
_VALIDATED = object()


@dataclass(frozen=True)
class Play:
    """
    一手出牌的结构化表示。
    ranks: 主体点数（升序，顺子类为连续点数）
    wings: 翅膀点数（升序，与主体不重叠）
    """
    kind: PlayKind
    ranks: Tuple[Rank, ...]
    wings: Tuple[Rank, ...] = ()
    _token: InitVar[object] = None

    def __post_init__(self, _token: object) -> None:
        if _token is not _VALIDATED:
            raise TypeError("Play 只能由牌型识别或出牌枚举产生，不能直接构造")

    @property
    def primary_rank(self) -> Rank:
        """主牌点数（主体中最小的点数，用于比较大小）"""
        return self.ranks[0]

    @property
    def run_length(self) -> int:
        """顺子/连对/飞机的连续组数，其他牌型为 1"""
        return len(self.ranks) if self.kind.is_chain else 1

    @property
    def counts(self) -> Counts:
        """这手牌按点数消耗的张数"""
        array = [0] * RANK_COUNT
        spec = self.kind.spec
        unit_size = spec.unit_size if spec else 1
        wing_size = spec.wing_size if spec else 0
        for r in self.ranks:
            array[r.index] = unit_size
        for r in self.wings:
            array[r.index] = wing_size
        return tuple(array)

    @property
    def card_count(self) -> int:
        return sum(self.counts)

    @property
    def is_bomb_like(self) -> bool:
        return self.kind.trump_level > 0

    @property
    def display(self) -> str:
        parts = []
        for r, count in zip(Rank, self.counts):
            if count:
                parts.append(r.display * count if not r.is_joker else r.display)
        return " ".join(parts)

    def compare_to(self, other: "Play") -> int:
        """严格比较：返回 -1/0/1，不可比较时抛出 IncomparablePlays"""
        return compare(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Play):
            return NotImplemented
        result = partial_compare(self, other)
        return result is not None and result < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Play):
            return NotImplemented
        result = partial_compare(self, other)
        return result is not None and result <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Play):
            return NotImplemented
        result = partial_compare(self, other)
        return result is not None and result > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Play):
            return NotImplemented
        result = partial_compare(self, other)
        return result is not None and result >= 0

    def __repr__(self) -> str:
        return f"[{self.kind.value}] {self.display}"


def _make_play(kind: PlayKind, ranks, wings=()) -> Play:
    """内部构造入口：调用方必须已经完成牌型校验"""
    return Play(kind, tuple(sorted(ranks)), tuple(sorted(wings)), _VALIDATED)
