"""手牌 - 按点数计数的不可变多重集合，54张整副牌的数据模型"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .counts import Counts, EMPTY, MAX_JOKER_COUNT, MAX_ORDINARY_COUNT
from .counts import add, covers, normalize, subtract
from .enumerator import iter_plays, search as search_counts
from .errors import InsufficientCards, InvalidCount
from .hand_detector import Composition, compose, detect_play, play_from_hand
from .hand_type import KindSpec, PlayKind
from .play import Play
from .rank import Rank


@dataclass(frozen=True, init=False)
class Hand:
    """
    一手牌：15种点数各有几张。
    构造时校验张数（普通点数 0~4，大小王 0~1），之后不可修改；
    出牌、合并等操作总是返回新的 Hand。
    """
    counts: Counts

    def __init__(self, counts=EMPTY):
        object.__setattr__(self, "counts", normalize(counts))

    # ============================================================
    #  构造
    # ============================================================

    @classmethod
    def from_counts(cls, counts) -> "Hand":
        """从15元组或 Rank → 张数 的映射构造，张数非法时抛出 InvalidCount"""
        return cls(counts)

    @classmethod
    def full_deck(cls) -> "Hand":
        """一副完整的54张牌"""
        return FULL_DECK

    @classmethod
    def of(cls, *ranks: Rank, **named: int) -> "Hand":
        """
        快捷构造：位置参数表示一张该点数，关键字参数指定张数。
        例如 Hand.of(Rank.FOUR, THREE=4) 表示 3333 4。
        同一点数重复指定时抛出 InvalidCount。
        """
        wanted = {}
        for rank in ranks:
            if rank in wanted:
                raise InvalidCount(f"重复指定了 `{rank.name}` 的张数")
            wanted[rank] = 1
        for name, count in named.items():
            rank = Rank.__members__.get(name)
            if rank is None:
                raise InvalidCount(f"未知点数: {name}")
            if rank in wanted:
                raise InvalidCount(f"重复指定了 `{rank.name}` 的张数")
            wanted[rank] = count
        return cls(wanted)

    @classmethod
    def from_play(cls, play: Play) -> "Hand":
        """一手出牌所包含的牌"""
        return cls(play.counts)

    # ============================================================
    #  查询
    # ============================================================

    def __getitem__(self, rank: Rank) -> int:
        return self.counts[rank.index]

    def __len__(self) -> int:
        return sum(self.counts)

    def __bool__(self) -> bool:
        return any(self.counts)

    def items(self) -> Iterator[Tuple[Rank, int]]:
        """按点数升序生成 (点数, 张数)，跳过张数为 0 的点数"""
        for rank in Rank:
            count = self.counts[rank.index]
            if count:
                yield rank, count

    def to_array(self) -> List[int]:
        return list(self.counts)

    def contains(self, other) -> bool:
        """other（Play 或 Hand）需要的每种点数张数都不超过本手牌"""
        return covers(self.counts, normalize(other))

    def __contains__(self, other) -> bool:
        return self.contains(other)

    def composition(self) -> Composition:
        return compose(self.counts)

    @property
    def display(self) -> str:
        parts = []
        for rank, count in self.items():
            parts.append(rank.display if rank.is_joker else rank.display * count)
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"Hand({self.display})"

    # ============================================================
    #  运算（总是返回新的 Hand）
    # ============================================================

    def without(self, other) -> "Hand":
        """
        去掉一手出牌（或另一手牌）后剩下的牌。
        任一点数不够减时抛出 InsufficientCards。
        """
        remaining = subtract(self.counts, normalize(other))
        for rank in Rank:
            if remaining[rank.index] < 0:
                raise InsufficientCards(
                    f"`{rank.name}` 只有 {self.counts[rank.index]} 张，不够打出"
                )
        return Hand(remaining)

    def __sub__(self, other) -> "Hand":
        if not isinstance(other, (Hand, Play)):
            return NotImplemented
        return self.without(other)

    def __add__(self, other) -> "Hand":
        """合并两手牌，任一点数超过上限时抛出 InvalidCount"""
        if not isinstance(other, (Hand, Play)):
            return NotImplemented
        return Hand(add(self.counts, normalize(other)))

    # ============================================================
    #  出牌
    # ============================================================

    def pick(self, counts) -> Play:
        """从手牌中选出一手牌：牌型非法抛出 UnrecognizedShape，牌不够抛出 InsufficientCards"""
        return play_from_hand(self, counts)

    def to_play(self) -> Play:
        """把整手牌当作一手出牌识别"""
        return detect_play(self.counts)

    def plays(self, kind: PlayKind, length: Optional[int] = None) -> Iterator[Play]:
        return iter_plays(self, kind, length)

    def all_plays(self) -> Iterator[Play]:
        return iter_plays(self)

    def search(self, spec: KindSpec, length: Optional[int] = None) -> Iterator["Hand"]:
        """按结构参数搜索牌组（不要求是标准牌型）"""
        for picked in search_counts(self.counts, spec, length):
            yield Hand(picked)


FULL_DECK = Hand(
    tuple(MAX_JOKER_COUNT if r.is_joker else MAX_ORDINARY_COUNT for r in Rank)
)
