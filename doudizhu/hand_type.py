"""牌型定义 - 斗地主14种合法牌型及其结构参数"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional

from .rank import CHAIN_RANKS


class PlayKind(str, Enum):
    """牌型枚举"""
    SOLO = "SOLO"                                   # 单张
    CHAIN = "CHAIN"                                 # 顺子 (≥5张)
    PAIR = "PAIR"                                   # 对子
    PAIRS_CHAIN = "PAIRS_CHAIN"                     # 连对 (≥3对)
    TRIO = "TRIO"                                   # 三条
    AIRPLANE = "AIRPLANE"                           # 飞机不带
    TRIO_WITH_SOLO = "TRIO_WITH_SOLO"               # 三带一
    AIRPLANE_WITH_SOLOS = "AIRPLANE_WITH_SOLOS"     # 飞机带单
    TRIO_WITH_PAIR = "TRIO_WITH_PAIR"               # 三带一对
    AIRPLANE_WITH_PAIRS = "AIRPLANE_WITH_PAIRS"     # 飞机带对
    BOMB = "BOMB"                                   # 炸弹
    FOUR_WITH_DUAL_SOLO = "FOUR_WITH_DUAL_SOLO"     # 四带二单
    FOUR_WITH_DUAL_PAIR = "FOUR_WITH_DUAL_PAIR"     # 四带二对
    ROCKET = "ROCKET"                               # 火箭(王炸)

    @property
    def spec(self) -> Optional["KindSpec"]:
        """牌型的结构参数；火箭没有通用结构，返回 None"""
        return KIND_SPECS.get(self)

    @property
    def is_chain(self) -> bool:
        """顺子/连对/飞机类：主体由连续点数组成"""
        spec = self.spec
        return spec is not None and spec.max_length > 1

    @property
    def has_wings(self) -> bool:
        spec = self.spec
        return spec is not None and spec.wing_size > 0

    @property
    def trump_level(self) -> int:
        """跨牌型压制等级：火箭 2，炸弹 1，其他 0"""
        if self is PlayKind.ROCKET:
            return 2
        if self is PlayKind.BOMB:
            return 1
        return 0


@dataclass(frozen=True)
class KindSpec:
    """
    一种牌型的结构描述。
    主体由 length 组连续的、每组 unit_size 张的同点数牌组成，
    另带 wings_per_unit × length 个互不相同的翅膀点数，每个翅膀 wing_size 张。
    """
    unit_size: int
    min_length: int = 1
    max_length: int = 1
    wing_size: int = 0
    wings_per_unit: int = 0

    def __post_init__(self) -> None:
        if self.unit_size < 1:
            raise ValueError(f"主体每组至少一张: unit_size={self.unit_size}")
        if not 1 <= self.min_length <= self.max_length:
            raise ValueError(f"长度范围非法: {self.min_length}~{self.max_length}")
        # 翅膀数量与翅膀张数必须同时为 0 或同时为正
        if (self.wing_size > 0) != (self.wings_per_unit > 0):
            raise ValueError(
                f"翅膀参数不一致: wing_size={self.wing_size}, wings_per_unit={self.wings_per_unit}"
            )

    def wing_count(self, length: int) -> int:
        return self.wings_per_unit * length

    def card_count(self, length: int) -> int:
        return length * self.unit_size + self.wing_count(length) * self.wing_size


_MAX_CHAIN = len(CHAIN_RANKS)

KIND_SPECS: Dict[PlayKind, KindSpec] = {
    PlayKind.SOLO: KindSpec(unit_size=1),
    PlayKind.CHAIN: KindSpec(unit_size=1, min_length=5, max_length=_MAX_CHAIN),
    PlayKind.PAIR: KindSpec(unit_size=2),
    PlayKind.PAIRS_CHAIN: KindSpec(unit_size=2, min_length=3, max_length=_MAX_CHAIN),
    PlayKind.TRIO: KindSpec(unit_size=3),
    PlayKind.AIRPLANE: KindSpec(unit_size=3, min_length=2, max_length=_MAX_CHAIN),
    PlayKind.TRIO_WITH_SOLO: KindSpec(unit_size=3, wing_size=1, wings_per_unit=1),
    PlayKind.AIRPLANE_WITH_SOLOS: KindSpec(
        unit_size=3, min_length=2, max_length=_MAX_CHAIN, wing_size=1, wings_per_unit=1
    ),
    PlayKind.TRIO_WITH_PAIR: KindSpec(unit_size=3, wing_size=2, wings_per_unit=1),
    PlayKind.AIRPLANE_WITH_PAIRS: KindSpec(
        unit_size=3, min_length=2, max_length=_MAX_CHAIN, wing_size=2, wings_per_unit=1
    ),
    PlayKind.BOMB: KindSpec(unit_size=4),
    PlayKind.FOUR_WITH_DUAL_SOLO: KindSpec(unit_size=4, wing_size=1, wings_per_unit=2),
    PlayKind.FOUR_WITH_DUAL_PAIR: KindSpec(unit_size=4, wing_size=2, wings_per_unit=2),
}
