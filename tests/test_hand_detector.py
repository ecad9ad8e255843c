"""牌型检测器单元测试 - 覆盖14种合法牌型 + 非法组合"""

import pytest

from doudizhu.errors import InsufficientCards, InvalidCount, UnrecognizedShape
from doudizhu.hand import Hand
from doudizhu.hand_detector import compose, detect_as, detect_play, play_from_hand, try_detect
from doudizhu.hand_type import PlayKind
from doudizhu.rank import Rank


# ============================================================
#  辅助：快速构造候选牌
# ============================================================

def sel(*ranks: Rank, **named: int) -> dict:
    """位置参数各一张，关键字参数指定张数，如 sel(Rank.THREE, KING=3)"""
    result = {r: 1 for r in ranks}
    result.update({Rank[name]: n for name, n in named.items()})
    return result


def run(first: Rank, last: Rank, count: int = 1) -> dict:
    """从 first 到 last 的连续点数，每个点数 count 张"""
    return {Rank(i): count for i in range(first, last + 1)}


# ============================================================
#  基础牌型测试
# ============================================================

class TestBasicTypes:
    """单张、对子、三条、炸弹、火箭"""

    def test_solo(self):
        play = detect_play(sel(Rank.ACE))
        assert play.kind == PlayKind.SOLO
        assert play.primary_rank == Rank.ACE
        assert play.run_length == 1

    def test_solo_joker(self):
        play = detect_play(sel(Rank.RED_JOKER))
        assert play.kind == PlayKind.SOLO
        assert play.primary_rank == Rank.RED_JOKER

    def test_pair(self):
        play = detect_play(sel(KING=2))
        assert play.kind == PlayKind.PAIR
        assert play.primary_rank == Rank.KING

    def test_trio(self):
        play = detect_play(sel(SEVEN=3))
        assert play.kind == PlayKind.TRIO
        assert play.primary_rank == Rank.SEVEN

    def test_bomb(self):
        play = detect_play(sel(ACE=4))
        assert play.kind == PlayKind.BOMB
        assert play.primary_rank == Rank.ACE

    def test_rocket(self):
        play = detect_play(sel(Rank.BLACK_JOKER, Rank.RED_JOKER))
        assert play.kind == PlayKind.ROCKET
        assert play.card_count == 2

    def test_empty_returns_none(self):
        assert try_detect({}) is None
        with pytest.raises(UnrecognizedShape):
            detect_play({})

    def test_joker_with_other_rank_invalid(self):
        """单王 + 单张不是合法牌型"""
        assert try_detect(sel(Rank.THREE, Rank.RED_JOKER)) is None


# ============================================================
#  带牌类测试
# ============================================================

class TestWithKickers:
    """三带一、三带对、四带二单、四带二对"""

    def test_trio_with_solo(self):
        play = detect_play(sel(Rank.THREE, EIGHT=3))
        assert play.kind == PlayKind.TRIO_WITH_SOLO
        assert play.primary_rank == Rank.EIGHT
        assert play.wings == (Rank.THREE,)

    def test_trio_with_joker_solo(self):
        play = detect_play(sel(Rank.BLACK_JOKER, EIGHT=3))
        assert play.kind == PlayKind.TRIO_WITH_SOLO
        assert play.wings == (Rank.BLACK_JOKER,)

    def test_trio_with_pair(self):
        play = detect_play(sel(JACK=3, FIVE=2))
        assert play.kind == PlayKind.TRIO_WITH_PAIR
        assert play.primary_rank == Rank.JACK
        assert play.wings == (Rank.FIVE,)

    def test_four_with_dual_solo(self):
        play = detect_play(sel(Rank.THREE, Rank.FIVE, TEN=4))
        assert play.kind == PlayKind.FOUR_WITH_DUAL_SOLO
        assert play.primary_rank == Rank.TEN
        assert play.wings == (Rank.THREE, Rank.FIVE)

    def test_four_with_equal_solos_invalid(self):
        """四带二单的两张单牌必须点数不同"""
        assert try_detect(sel(TEN=4, THREE=2)) is None

    def test_four_with_rocket_invalid(self):
        """大小王不能拆开当作四带二的翅膀"""
        assert try_detect(sel(Rank.BLACK_JOKER, Rank.RED_JOKER, TEN=4)) is None

    def test_four_with_dual_pair(self):
        play = detect_play(sel(QUEEN=4, THREE=2, FIVE=2))
        assert play.kind == PlayKind.FOUR_WITH_DUAL_PAIR
        assert play.primary_rank == Rank.QUEEN
        assert play.wings == (Rank.THREE, Rank.FIVE)

    def test_four_with_solo_and_pair_invalid(self):
        assert try_detect(sel(Rank.THREE, QUEEN=4, FIVE=2)) is None


# ============================================================
#  顺子类测试
# ============================================================

class TestChains:
    """顺子、连对"""

    def test_chain_5(self):
        """5张顺子: 3-4-5-6-7"""
        play = detect_play(run(Rank.THREE, Rank.SEVEN))
        assert play.kind == PlayKind.CHAIN
        assert play.primary_rank == Rank.THREE
        assert play.run_length == 5

    def test_chain_12(self):
        """最长顺子: 3到A共12张"""
        play = detect_play(run(Rank.THREE, Rank.ACE))
        assert play.kind == PlayKind.CHAIN
        assert play.run_length == 12

    def test_chain_with_two_invalid(self):
        """包含2的顺子非法"""
        assert try_detect(run(Rank.TEN, Rank.TWO)) is None

    def test_chain_too_short(self):
        assert try_detect(run(Rank.THREE, Rank.SIX)) is None

    def test_chain_with_gap_invalid(self):
        cards = run(Rank.THREE, Rank.EIGHT)
        del cards[Rank.FIVE]
        assert try_detect(cards) is None

    def test_pairs_chain_3(self):
        """3对连对: 33-44-55"""
        play = detect_play(run(Rank.THREE, Rank.FIVE, 2))
        assert play.kind == PlayKind.PAIRS_CHAIN
        assert play.primary_rank == Rank.THREE
        assert play.run_length == 3

    def test_two_pairs_invalid(self):
        assert try_detect(run(Rank.THREE, Rank.FOUR, 2)) is None

    def test_pairs_chain_with_two_invalid(self):
        assert try_detect(run(Rank.KING, Rank.TWO, 2)) is None


# ============================================================
#  飞机类测试
# ============================================================

class TestAirplanes:
    """飞机不带、飞机带单、飞机带对"""

    def test_airplane_plain(self):
        """飞机不带: 333-444"""
        play = detect_play(sel(THREE=3, FOUR=3))
        assert play.kind == PlayKind.AIRPLANE
        assert play.primary_rank == Rank.THREE
        assert play.run_length == 2

    def test_airplane_with_solos(self):
        """飞机带单: 333-444 + 5 + 6"""
        play = detect_play(sel(Rank.FIVE, Rank.SIX, THREE=3, FOUR=3))
        assert play.kind == PlayKind.AIRPLANE_WITH_SOLOS
        assert play.ranks == (Rank.THREE, Rank.FOUR)
        assert play.wings == (Rank.FIVE, Rank.SIX)
        assert play.run_length == 2

    def test_airplane_with_single_joker(self):
        play = detect_play(sel(Rank.FIVE, Rank.RED_JOKER, QUEEN=3, KING=3))
        assert play.kind == PlayKind.AIRPLANE_WITH_SOLOS

    def test_airplane_with_rocket_wings_invalid(self):
        assert try_detect(sel(Rank.BLACK_JOKER, Rank.RED_JOKER, THREE=3, FOUR=3)) is None

    def test_airplane_with_pairs(self):
        """飞机带对: 333-444 + 55 + 66"""
        play = detect_play(sel(THREE=3, FOUR=3, FIVE=2, SIX=2))
        assert play.kind == PlayKind.AIRPLANE_WITH_PAIRS
        assert play.primary_rank == Rank.THREE
        assert play.wings == (Rank.FIVE, Rank.SIX)

    def test_airplane_3_groups(self):
        """3组飞机不带: 333-444-555"""
        play = detect_play(run(Rank.THREE, Rank.FIVE, 3))
        assert play.kind == PlayKind.AIRPLANE
        assert play.run_length == 3

    def test_airplane_not_consecutive(self):
        assert try_detect(sel(THREE=3, FIVE=3)) is None

    def test_airplane_with_two_invalid(self):
        assert try_detect(sel(ACE=3, TWO=3)) is None

    def test_wing_count_mismatch(self):
        """翅膀数量必须等于三条组数"""
        assert try_detect(sel(Rank.FIVE, THREE=3, FOUR=3)) is None

    def test_mixed_wings_invalid(self):
        """翅膀不能单张和对子混带"""
        assert try_detect(sel(Rank.FIVE, THREE=3, FOUR=3, SIX=2)) is None


# ============================================================
#  接口行为测试
# ============================================================

class TestDetectorApi:
    """张数校验、按牌型识别、结构分析、从手牌选牌"""

    def test_invalid_count_rejected(self):
        with pytest.raises(InvalidCount):
            detect_play(sel(THREE=5))
        with pytest.raises(InvalidCount):
            detect_play(sel(BLACK_JOKER=2))

    def test_recognition_is_pure(self):
        cards = sel(Rank.FIVE, Rank.SIX, THREE=3, FOUR=3)
        assert detect_play(cards) == detect_play(cards)
        assert detect_play(cards) == detect_play(Hand.from_counts(cards))

    def test_detect_as(self):
        assert detect_as(sel(THREE=4), PlayKind.BOMB).kind == PlayKind.BOMB
        assert detect_as(sel(THREE=4), PlayKind.TRIO) is None

    def test_compose(self):
        comp = compose(sel(Rank.THREE, Rank.FOUR, FIVE=2, TWO=3))
        assert comp.solos.ranks == (Rank.THREE, Rank.FOUR)
        assert comp.solos.consecutive
        assert comp.pairs.ranks == (Rank.FIVE,)
        assert comp.trios.ranks == (Rank.TWO,)
        assert not comp.trios.consecutive
        assert not comp.fours

    def test_play_from_hand(self):
        hand = Hand.of(Rank.FOUR, THREE=3)
        play = play_from_hand(hand, sel(Rank.FOUR, THREE=3))
        assert play.kind == PlayKind.TRIO_WITH_SOLO

    def test_play_from_hand_insufficient(self):
        hand = Hand.of(Rank.FOUR, THREE=2)
        with pytest.raises(InsufficientCards):
            play_from_hand(hand, sel(Rank.FOUR, THREE=3))
