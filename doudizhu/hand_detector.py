"""牌型检测器 - 把一组按点数计数的牌识别为合法牌型并构建 Play"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .counts import normalize
from .errors import InsufficientCards, UnrecognizedShape
from .hand_type import PlayKind
from .play import Play, _make_play
from .rank import Rank, CHAIN_RANKS, JOKERS

logger = logging.getLogger(__name__)


# ============================================================
#  结构分析
# ============================================================

@dataclass(frozen=True)
class Group:
    """出现次数相同的一组点数，以及它们是否构成可以连牌的连续序列"""
    ranks: Tuple[Rank, ...]
    consecutive: bool

    def __len__(self) -> int:
        return len(self.ranks)


@dataclass(frozen=True)
class Composition:
    """把一组牌拆成单张、对子、三条、四条四个分组"""
    solos: Group
    pairs: Group
    trios: Group
    fours: Group

    @property
    def is_empty(self) -> bool:
        return not (self.solos or self.pairs or self.trios or self.fours)

    def only(self, *names: str) -> bool:
        """除了 names 指定的分组外，其余分组都为空"""
        return all(
            not getattr(self, name)
            for name in ("solos", "pairs", "trios", "fours")
            if name not in names
        )


def _make_group(ranks: List[Rank]) -> Group:
    consecutive = all(r in CHAIN_RANKS for r in ranks) and all(
        ranks[i + 1] - ranks[i] == 1 for i in range(len(ranks) - 1)
    )
    return Group(tuple(ranks), consecutive)


def compose(counts) -> Composition:
    """按张数把点数分组（点数升序），张数为 0 的点数被丢弃"""
    array = normalize(counts)
    buckets: Dict[int, List[Rank]] = {1: [], 2: [], 3: [], 4: []}
    for rank in Rank:
        count = array[rank.index]
        if count:
            buckets[count].append(rank)
    return Composition(
        solos=_make_group(buckets[1]),
        pairs=_make_group(buckets[2]),
        trios=_make_group(buckets[3]),
        fours=_make_group(buckets[4]),
    )


def _has_rocket(ranks: Tuple[Rank, ...]) -> bool:
    """大小王同时出现（只能作为火箭打出，不能拆成翅膀）"""
    return all(j in ranks for j in JOKERS)


# ============================================================
#  特殊牌型检测
# ============================================================

def _detect_rocket(comp: Composition) -> Optional[Play]:
    """火箭：大王 + 小王，且没有其他牌"""
    if comp.only("solos") and comp.solos.ranks == JOKERS:
        return _make_play(PlayKind.ROCKET, JOKERS)
    return None


def _detect_bomb(comp: Composition) -> Optional[Play]:
    """炸弹：四张相同点数"""
    if comp.only("fours") and len(comp.fours) == 1:
        return _make_play(PlayKind.BOMB, comp.fours.ranks)
    return None


def _detect_four_with_dual_solo(comp: Composition) -> Optional[Play]:
    """四带二单：四条 + 两张不同点数的单牌（不能是大小王）"""
    if (
        comp.only("fours", "solos")
        and len(comp.fours) == 1
        and len(comp.solos) == 2
        and not _has_rocket(comp.solos.ranks)
    ):
        return _make_play(PlayKind.FOUR_WITH_DUAL_SOLO, comp.fours.ranks, comp.solos.ranks)
    return None


def _detect_four_with_dual_pair(comp: Composition) -> Optional[Play]:
    """四带二对：四条 + 两个不同对子"""
    if comp.only("fours", "pairs") and len(comp.fours) == 1 and len(comp.pairs) == 2:
        return _make_play(PlayKind.FOUR_WITH_DUAL_PAIR, comp.fours.ranks, comp.pairs.ranks)
    return None


# ============================================================
#  顺子类检测
# ============================================================

def _detect_chain(comp: Composition) -> Optional[Play]:
    """顺子：≥5张连续单牌，不含2和王"""
    if comp.only("solos") and len(comp.solos) >= 5 and comp.solos.consecutive:
        return _make_play(PlayKind.CHAIN, comp.solos.ranks)
    return None


def _detect_pairs_chain(comp: Composition) -> Optional[Play]:
    """连对：≥3对连续对子，不含2和王"""
    if comp.only("pairs") and len(comp.pairs) >= 3 and comp.pairs.consecutive:
        return _make_play(PlayKind.PAIRS_CHAIN, comp.pairs.ranks)
    return None


# ============================================================
#  三条类检测
# ============================================================

def _detect_trio(comp: Composition) -> Optional[Play]:
    """三条：三张相同点数"""
    if comp.only("trios") and len(comp.trios) == 1:
        return _make_play(PlayKind.TRIO, comp.trios.ranks)
    return None


def _detect_trio_with_solo(comp: Composition) -> Optional[Play]:
    """三带一：三条 + 一张单牌"""
    if comp.only("trios", "solos") and len(comp.trios) == 1 and len(comp.solos) == 1:
        return _make_play(PlayKind.TRIO_WITH_SOLO, comp.trios.ranks, comp.solos.ranks)
    return None


def _detect_trio_with_pair(comp: Composition) -> Optional[Play]:
    """三带一对：三条 + 一个对子"""
    if comp.only("trios", "pairs") and len(comp.trios) == 1 and len(comp.pairs) == 1:
        return _make_play(PlayKind.TRIO_WITH_PAIR, comp.trios.ranks, comp.pairs.ranks)
    return None


# ============================================================
#  飞机类检测
# ============================================================

def _is_airplane_body(comp: Composition) -> bool:
    return len(comp.trios) >= 2 and comp.trios.consecutive


def _detect_airplane(comp: Composition) -> Optional[Play]:
    """飞机不带：≥2组连续三条，不含2和王"""
    if comp.only("trios") and _is_airplane_body(comp):
        return _make_play(PlayKind.AIRPLANE, comp.trios.ranks)
    return None


def _detect_airplane_with_solos(comp: Composition) -> Optional[Play]:
    """飞机带单：连续三条 + 等量的不同点数单牌"""
    if (
        comp.only("trios", "solos")
        and _is_airplane_body(comp)
        and len(comp.solos) == len(comp.trios)
        and not _has_rocket(comp.solos.ranks)
    ):
        return _make_play(PlayKind.AIRPLANE_WITH_SOLOS, comp.trios.ranks, comp.solos.ranks)
    return None


def _detect_airplane_with_pairs(comp: Composition) -> Optional[Play]:
    """飞机带对：连续三条 + 等量的不同点数对子"""
    if (
        comp.only("trios", "pairs")
        and _is_airplane_body(comp)
        and len(comp.pairs) == len(comp.trios)
    ):
        return _make_play(PlayKind.AIRPLANE_WITH_PAIRS, comp.trios.ranks, comp.pairs.ranks)
    return None


# ============================================================
#  基础牌型检测
# ============================================================

def _detect_solo(comp: Composition) -> Optional[Play]:
    """单张"""
    if comp.only("solos") and len(comp.solos) == 1:
        return _make_play(PlayKind.SOLO, comp.solos.ranks)
    return None


def _detect_pair(comp: Composition) -> Optional[Play]:
    """对子：两张相同点数"""
    if comp.only("pairs") and len(comp.pairs) == 1:
        return _make_play(PlayKind.PAIR, comp.pairs.ranks)
    return None


_DETECTORS: Dict[PlayKind, Callable[[Composition], Optional[Play]]] = {
    PlayKind.ROCKET: _detect_rocket,
    PlayKind.BOMB: _detect_bomb,
    PlayKind.FOUR_WITH_DUAL_SOLO: _detect_four_with_dual_solo,
    PlayKind.FOUR_WITH_DUAL_PAIR: _detect_four_with_dual_pair,
    PlayKind.CHAIN: _detect_chain,
    PlayKind.PAIRS_CHAIN: _detect_pairs_chain,
    PlayKind.TRIO: _detect_trio,
    PlayKind.TRIO_WITH_SOLO: _detect_trio_with_solo,
    PlayKind.TRIO_WITH_PAIR: _detect_trio_with_pair,
    PlayKind.AIRPLANE: _detect_airplane,
    PlayKind.AIRPLANE_WITH_SOLOS: _detect_airplane_with_solos,
    PlayKind.AIRPLANE_WITH_PAIRS: _detect_airplane_with_pairs,
    PlayKind.SOLO: _detect_solo,
    PlayKind.PAIR: _detect_pair,
}


# ============================================================
#  对外接口
# ============================================================

def try_detect(counts) -> Optional[Play]:
    """
    识别一组牌的牌型。
    返回 Play 或 None（非法牌型）。张数本身非法时抛出 InvalidCount。
    """
    comp = compose(counts)
    if comp.is_empty:
        return None

    # 按检测优先级依次尝试：火箭 > 炸弹 > 四带二 > 顺子类 > 三条类 > 飞机类 > 单张/对子
    for detector in _DETECTORS.values():
        play = detector(comp)
        if play is not None:
            return play
    return None


def detect_play(counts) -> Play:
    """识别牌型，非法牌型抛出 UnrecognizedShape"""
    play = try_detect(counts)
    if play is None:
        logger.debug("无法识别的牌型: %s", counts)
        raise UnrecognizedShape(f"所选的牌不构成合法牌型: {_describe(counts)}")
    return play


def detect_as(counts, kind: PlayKind) -> Optional[Play]:
    """按指定牌型识别，结构不符时返回 None"""
    return _DETECTORS[kind](compose(counts))


def play_from_hand(hand, counts) -> Play:
    """
    从手牌中选出一手牌：先识别牌型，再检查手牌是否足够。
    手牌不足时抛出 InsufficientCards。
    """
    play = detect_play(counts)
    if not hand.contains(play):
        logger.debug("手牌 %r 不包含 %r", hand, play)
        raise InsufficientCards(f"手牌中没有足够的牌打出 {play!r}")
    return play


def _describe(counts) -> str:
    array = normalize(counts)
    parts = [
        f"{rank.display}×{array[rank.index]}"
        for rank in Rank
        if array[rank.index]
    ]
    return " ".join(parts) or "(空)"
