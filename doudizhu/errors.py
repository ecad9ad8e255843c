"""规则引擎异常定义"""


class RuleError(Exception):
    """所有规则判定错误的基类"""


class InvalidCount(RuleError):
    """手牌张数非法：普通点数超过4张、大小王超过1张或出现负数"""


class UnrecognizedShape(RuleError):
    """所选的牌不构成任何合法牌型"""


class InsufficientCards(RuleError):
    """手牌中没有足够的牌组成该出牌"""


class IncomparablePlays(RuleError):
    """两手牌既不同型也不是炸弹/火箭，无法比较大小"""
