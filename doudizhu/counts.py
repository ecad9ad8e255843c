"""张数数组 - 按点数记录张数的15元组，以及输入校验"""

from typing import Mapping, Sequence, Tuple, Union

from .errors import InvalidCount
from .rank import Rank, RANK_COUNT

# 每种点数允许的最大张数
MAX_ORDINARY_COUNT = 4
MAX_JOKER_COUNT = 1

Counts = Tuple[int, ...]
CountsLike = Union[Sequence[int], Mapping[Rank, int]]

EMPTY: Counts = (0,) * RANK_COUNT


def max_count(rank: Rank) -> int:
    return MAX_JOKER_COUNT if rank.is_joker else MAX_ORDINARY_COUNT


def normalize(counts) -> Counts:
    """
    把各种形式的张数输入统一成经过校验的15元组。
    支持：长度为15的序列、Rank → 张数 的映射、带 counts 属性的对象（Hand / Play）。
    """
    if hasattr(counts, "counts"):
        counts = counts.counts

    if isinstance(counts, Mapping):
        array = [0] * RANK_COUNT
        for rank, count in counts.items():
            if not isinstance(rank, Rank):
                raise InvalidCount(f"未知点数: {rank!r}")
            array[rank.index] = count
    else:
        try:
            array = list(counts)
        except TypeError:
            raise InvalidCount(f"无法解析为张数数组: {counts!r}") from None
        if len(array) != RANK_COUNT:
            raise InvalidCount(f"张数数组长度错误: 期望 {RANK_COUNT}，实际 {len(array)}")

    for rank in Rank:
        count = array[rank.index]
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidCount(f"`{rank.name}` 的张数不是整数: {count!r}")
        if count < 0:
            raise InvalidCount(f"`{rank.name}` 的张数为负数: {count}")
        if count > max_count(rank):
            if rank.is_joker:
                raise InvalidCount(f"`{rank.name}` 最多一张，实际 {count} 张")
            raise InvalidCount(f"`{rank.name}` 最多四张，实际 {count} 张")
    return tuple(array)


def subtract(left: Counts, right: Counts) -> Tuple[int, ...]:
    """逐点数相减（不做校验，结果可能含负数）"""
    return tuple(a - b for a, b in zip(left, right))


def add(left: Counts, right: Counts) -> Tuple[int, ...]:
    """逐点数相加（不做校验，结果可能超出上限）"""
    return tuple(a + b for a, b in zip(left, right))


def covers(left: Counts, right: Counts) -> bool:
    """left 的每种点数张数都不少于 right"""
    return all(a >= b for a, b in zip(left, right))
