"""ながしの解析.

券種によって2種類のレイアウトがある。

3連複・3連単:
    [42]      式別
    [43]      ながしの種類
    [44:62]   1着目の選択ビットマップ
    [62:80]   2着目の選択ビットマップ
    [80:98]   3着目の選択ビットマップ
    [98:103]  金額（1点あたり、100円単位）
    [103:105] マルチフラグ

枠連・馬連・馬単・ワイド:
    [42]      式別
    [43]      ながしの種類
    [44:46]   軸馬番
    [46:51]   金額（1点あたり、100円単位）
    [51:69]   相手の選択ビットマップ
"""
from __future__ import annotations

from math import comb

from ..enums import BetType
from ..value_objects import NagashiSelection, RawCode
from .code_fields import read_horse_bitmap, read_horse_number, read_stake

NAGASHI_BET_TYPE_POS = 42
NAGASHI_TYPE_POS = 43

# ながしの種類
TWO_AXIS_TRIFECTA = 1
SECOND_PLACE = 2
TWO_AXIS_TRIO = 3
ONE_AXIS_AXIS_FIRST = 4
ONE_AXIS_AXIS_LAST = 6
ONE_AXIS_TRIO = 7

# 3頭の並び順の数（マルチ）
MULTI_ARRANGEMENTS = 6

MIN_TRIPLE_CODE_LENGTH = 105
TRIPLE_BITMAP_STARTS = (44, 62, 80)
TRIPLE_STAKE_POS = 98
TRIPLE_MULTI_FLAG_POSITIONS = (103, 104)

MIN_PAIRED_CODE_LENGTH = 70
PAIRED_AXIS_POS = 44
PAIRED_STAKE_POS = 46
PAIRED_OPPONENT_BITMAP_POS = 51

_PAIRED_BET_TYPES = (
    BetType.BRACKET_QUINELLA,
    BetType.QUINELLA,
    BetType.EXACTA,
    BetType.QUINELLA_PLACE,
)


def _exclude(pool: tuple[int, ...], *axes: tuple[int, ...]) -> tuple[int, ...]:
    """pool の重複を除き、軸に含まれる馬を取り除く（出現順を保つ）."""
    excluded = {n for axis in axes for n in axis}
    return tuple(n for n in dict.fromkeys(pool) if n not in excluded)


def _decode_triple(code: RawCode, bet_type: BetType, nagashi_type: int) -> NagashiSelection | None:
    if len(code) < MIN_TRIPLE_CODE_LENGTH:
        return None

    is_multi = any(code.char_at(pos) == "1" for pos in TRIPLE_MULTI_FLAG_POSITIONS)
    stake = read_stake(code, TRIPLE_STAKE_POS)
    if stake is None:
        return None
    area1, area2, area3 = (read_horse_bitmap(code, start) for start in TRIPLE_BITMAP_STARTS)

    axis2: tuple[int, ...] = ()
    if bet_type == BetType.TRIFECTA:
        if nagashi_type == TWO_AXIS_TRIFECTA:
            axis1, axis2 = area1, area2
            opponents = _exclude(area3, axis1, axis2)
            n = len(opponents)
            pattern_count = n * MULTI_ARRANGEMENTS if is_multi else n
        else:
            if nagashi_type == ONE_AXIS_AXIS_FIRST:
                axis1, pool = area1, area2 + area3
            else:
                axis1, pool = area3, area1 + area2
            opponents = _exclude(pool, axis1)
            n = len(opponents)
            pattern_count = comb(n, 2) * MULTI_ARRANGEMENTS if is_multi else n * (n - 1)
    else:
        axis1 = area1
        if nagashi_type == TWO_AXIS_TRIO:
            axis2 = area2
            opponents = _exclude(area3, axis1, axis2)
            pattern_count = len(opponents)
        else:
            opponents = _exclude(area2 + area3, axis1)
            pattern_count = comb(len(opponents), 2)

    return NagashiSelection(
        bet_type=bet_type,
        nagashi_type=nagashi_type,
        axis1=axis1,
        axis2=axis2,
        opponents=opponents,
        unit_stake=stake,
        pattern_count=pattern_count,
        is_multi=is_multi,
    )


def _decode_paired(code: RawCode, bet_type: BetType, nagashi_type: int) -> NagashiSelection | None:
    if len(code) < MIN_PAIRED_CODE_LENGTH:
        return None

    axis = read_horse_number(code, PAIRED_AXIS_POS)
    stake = read_stake(code, PAIRED_STAKE_POS)
    if stake is None:
        return None
    opponents = read_horse_bitmap(code, PAIRED_OPPONENT_BITMAP_POS)

    return NagashiSelection(
        bet_type=bet_type,
        nagashi_type=nagashi_type,
        axis1=(axis,) if axis is not None else (),
        axis2=(),
        opponents=opponents,
        unit_stake=stake,
        pattern_count=len(opponents),
        is_multi=False,
    )


def decode_nagashi_selection(code: RawCode | str) -> NagashiSelection | None:
    """ながしの選択情報を解析する（読み取れない場合はNone）."""
    raw = RawCode.of(code)
    bet_type = BetType.from_code(raw.char_at(NAGASHI_BET_TYPE_POS))
    type_digit = raw.char_at(NAGASHI_TYPE_POS)
    if bet_type is None or type_digit is None:
        return None

    nagashi_type = int(type_digit)
    if bet_type.is_triple():
        return _decode_triple(raw, bet_type, nagashi_type)
    if bet_type in _PAIRED_BET_TYPES:
        return _decode_paired(raw, bet_type, nagashi_type)
    return None
