"""牌型比较 - 火箭/炸弹的跨牌型压制与同型比较"""

from typing import TYPE_CHECKING, Optional

from .errors import IncomparablePlays
from .hand_type import PlayKind

if TYPE_CHECKING:
    from .play import Play


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def kind_partial_compare(a: PlayKind, b: PlayKind) -> Optional[int]:
    """
    只看牌型的大小关系。
    同一牌型返回 0；压制等级不同（火箭 > 炸弹 > 其他）时按等级比较；
    否则两种牌型之间没有先后，返回 None。
    """
    if a is b:
        return 0
    if a.trump_level == b.trump_level:
        return None
    return _sign(a.trump_level - b.trump_level)


def partial_compare(a: "Play", b: "Play") -> Optional[int]:
    """
    比较两手牌，返回 -1/0/1，不可比较时返回 None。
    规则：
    1. 火箭压一切，炸弹压非炸弹/非火箭（四带二不算炸弹）
    2. 炸弹之间比点数
    3. 同牌型且同长度才能比较，只比主牌点数，翅膀不影响大小
    """
    if a.kind is not b.kind:
        return kind_partial_compare(a.kind, b.kind)

    # 火箭只有一种
    if a.kind is PlayKind.ROCKET:
        return 0

    if a.run_length != b.run_length:
        return None
    return _sign(a.primary_rank - b.primary_rank)


def compare(a: "Play", b: "Play") -> int:
    """严格比较，不可比较时抛出 IncomparablePlays"""
    result = partial_compare(a, b)
    if result is None:
        raise IncomparablePlays(
            f"无法比较 {a.kind.value}(长度 {a.run_length}) 与 "
            f"{b.kind.value}(长度 {b.run_length})"
        )
    return result


def comparable(a: "Play", b: "Play") -> bool:
    return partial_compare(a, b) is not None


def can_beat(current: "Play", previous: "Play") -> bool:
    """判断 current 能否压过 previous（不可比较视为压不过）"""
    result = partial_compare(current, previous)
    return result is not None and result > 0
