# 斗地主规则引擎
from .rank import Rank, ORDINARY_RANKS, JOKERS, CHAIN_RANKS
from .errors import RuleError, InvalidCount, UnrecognizedShape, InsufficientCards, IncomparablePlays
from .hand_type import PlayKind, KindSpec, KIND_SPECS
from .play import Play
from .comparator import compare, partial_compare, comparable, can_beat, kind_partial_compare
from .hand_detector import Composition, Group, compose, detect_play, try_detect, detect_as, play_from_hand
from .enumerator import iter_plays, iter_beating_plays, count_plays, search
from .hand import Hand, FULL_DECK
