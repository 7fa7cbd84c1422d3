"""フォーメーションの解析.

    [42]      式別
    [43]      "0" 固定
    [44:62]   1着目の選択ビットマップ
    [62:80]   2着目の選択ビットマップ
    [80:98]   3着目の選択ビットマップ
    [98:103]  金額（1点あたり、100円単位）
"""
from __future__ import annotations

from itertools import product

from ..enums import BetType
from ..value_objects import FormationSelection, RawCode
from .code_fields import read_horse_bitmap, read_stake

FORMATION_BET_TYPE_POS = 42
FORMATION_MARKER_POS = 43
FORMATION_MARKER = "0"
FORMATION_BITMAP_STARTS = (44, 62, 80)
FORMATION_STAKE_POS = 98
MIN_FORMATION_CODE_LENGTH = 103


def _distinct_triples(
    first: tuple[int, ...], second: tuple[int, ...], third: tuple[int, ...]
) -> list[tuple[int, int, int]]:
    return [
        (h1, h2, h3)
        for h1, h2, h3 in product(first, second, third)
        if h1 != h2 and h3 != h1 and h3 != h2
    ]


def _distinct_pairs(first: tuple[int, ...], second: tuple[int, ...]) -> list[tuple[int, int]]:
    return [(h1, h2) for h1, h2 in product(first, second) if h1 != h2]


def count_formation_patterns(
    bet_type: BetType,
    first: tuple[int, ...],
    second: tuple[int, ...],
    third: tuple[int, ...],
) -> int:
    """フォーメーションの点数を数える.

    3連単・馬単は着順付きの組、3連複・枠連・馬連・ワイドは並べ替えて同じ組を1点とする。
    """
    if bet_type.is_triple():
        combos = _distinct_triples(first, second, third)
    elif bet_type.get_required_count() == 2:
        combos = _distinct_pairs(first, second)
    else:
        # 単勝・複勝のフォーメーションは通常存在しない
        return len(first)
    if bet_type.is_order_required():
        return len(combos)
    return len({tuple(sorted(c)) for c in combos})


def decode_formation_selection(code: RawCode | str) -> FormationSelection | None:
    """フォーメーションの選択情報を解析する（読み取れない場合はNone）."""
    raw = RawCode.of(code)
    if len(raw) < MIN_FORMATION_CODE_LENGTH:
        return None

    bet_type = BetType.from_code(raw.char_at(FORMATION_BET_TYPE_POS))
    if bet_type is None or raw.char_at(FORMATION_MARKER_POS) != FORMATION_MARKER:
        return None

    first, second, third = (read_horse_bitmap(raw, start) for start in FORMATION_BITMAP_STARTS)
    stake = read_stake(raw, FORMATION_STAKE_POS)
    if stake is None:
        return None

    return FormationSelection(
        bet_type=bet_type,
        first_place=first,
        second_place=second,
        third_place=third,
        unit_stake=stake,
        pattern_count=count_formation_patterns(bet_type, first, second, third),
    )
