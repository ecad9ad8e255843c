"""出牌枚举 - 列举一手牌中所有可以打出的合法牌型（惰性生成）"""

import logging
from itertools import combinations
from typing import Iterable, Iterator, List, Optional, Tuple

from .comparator import can_beat
from .counts import Counts, normalize
from .hand_detector import detect_as
from .hand_type import KindSpec, PlayKind
from .play import Play, _make_play
from .rank import Rank, CHAIN_RANKS, JOKERS, RANK_COUNT

logger = logging.getLogger(__name__)


# ============================================================
#  通用搜索
# ============================================================

def _lengths(spec: KindSpec, length: Optional[int]) -> Iterable[int]:
    if length is None:
        return range(spec.min_length, spec.max_length + 1)
    if spec.min_length <= length <= spec.max_length:
        return (length,)
    return ()


def _find_cores(array: Counts, spec: KindSpec, length: int) -> Iterator[Tuple[Rank, ...]]:
    """找出所有主体：非连牌为单个点数，连牌为 length 个连续点数（只用 3~A）"""
    if spec.max_length == 1:
        for rank in Rank:
            if array[rank.index] >= spec.unit_size:
                yield (rank,)
        return

    for start in range(len(CHAIN_RANKS) - length + 1):
        window = CHAIN_RANKS[start:start + length]
        if all(array[r.index] >= spec.unit_size for r in window):
            yield window


def _find_wings(
    array: Counts, spec: KindSpec, core: Tuple[Rank, ...], length: int
) -> Iterator[Tuple[Rank, ...]]:
    """从主体以外的点数中选出互不相同的翅膀组合（按点数字典序逐个生成）"""
    need = spec.wing_count(length)
    if need == 0:
        yield ()
        return
    candidates = [
        r for r in Rank
        if r not in core and array[r.index] >= spec.wing_size
    ]
    yield from combinations(candidates, need)


def search(hand, spec: KindSpec, length: Optional[int] = None) -> Iterator[Counts]:
    """
    按结构参数搜索手牌中所有可以取出的牌组，逐个生成按点数计数的15元组。
    结果不一定是标准牌型（例如翅膀可能同时含大小王），由调用方再做识别。
    """
    array = normalize(hand)
    for n in _lengths(spec, length):
        for core in _find_cores(array, spec, n):
            for wings in _find_wings(array, spec, core, n):
                picked = [0] * RANK_COUNT
                for r in core:
                    picked[r.index] = spec.unit_size
                for r in wings:
                    picked[r.index] = spec.wing_size
                yield tuple(picked)


# ============================================================
#  标准牌型枚举
# ============================================================

def _iter_kind(array: Counts, kind: PlayKind, length: Optional[int]) -> Iterator[Play]:
    logger.debug("枚举牌型 %s (长度 %s)", kind.value, length)

    # 火箭没有通用结构，单独处理
    if kind is PlayKind.ROCKET:
        if length in (None, 1) and all(array[j.index] for j in JOKERS):
            yield _make_play(PlayKind.ROCKET, JOKERS)
        return

    for picked in search(array, kind.spec, length):
        play = detect_as(picked, kind)
        if play is not None:
            yield play


def iter_plays(hand, kind: Optional[PlayKind] = None, length: Optional[int] = None) -> Iterator[Play]:
    """
    惰性列举手牌中所有指定牌型（kind 为 None 时为全部牌型）的出牌。
    同一牌型内按长度升序、主牌点数升序、翅膀点数字典序生成，不会重复。
    length 只对顺子/连对/飞机类有意义，其他牌型长度恒为 1。
    """
    array = normalize(hand)
    kinds: List[PlayKind] = list(PlayKind) if kind is None else [kind]
    for k in kinds:
        yield from _iter_kind(array, k, length)


def iter_beating_plays(hand, target: Play) -> Iterator[Play]:
    """
    惰性列举手牌中所有能压过 target 的出牌：
    先是同型同长度且主牌更大的，再是炸弹，最后是火箭。
    """
    array = normalize(hand)
    kinds = [target.kind] + [
        k for k in (PlayKind.BOMB, PlayKind.ROCKET) if k is not target.kind
    ]
    for kind in kinds:
        length = target.run_length if kind is target.kind and kind.is_chain else None
        for play in _iter_kind(array, kind, length):
            if can_beat(play, target):
                yield play


def count_plays(hand, kind: Optional[PlayKind] = None, length: Optional[int] = None) -> int:
    return sum(1 for _ in iter_plays(hand, kind, length))
