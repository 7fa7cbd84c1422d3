"""通常・応援馬券の各口の解析.

43桁目（位置42）から1口ずつ可変長で並ぶ:
    単勝・複勝:         式別(1) 1着(2) 00(2)         金額(5)
    馬単:               式別(1) 1着(2) 2着(2) 裏(2)   金額(5)
    枠連・馬連・ワイド: 式別(1) 1着(2) 2着(2) 00(2)   金額(5)
    3連複・3連単:       式別(1) 1着(2) 2着(2) 3着(2)  金額(5)

式別が "0" または未定義のコードで終了する。
"""
from ..enums import BetType
from ..value_objects import NormalEntry, RawCode
from .code_fields import read_horse_number, read_stake

NORMAL_ENTRIES_START = 42
MIN_NORMAL_CODE_LENGTH = 55

_PAIR_WITH_SENTINEL = (BetType.BRACKET_QUINELLA, BetType.QUINELLA, BetType.QUINELLA_PLACE)


def _decode_entry(code: RawCode, pos: int, bet_type: BetType) -> tuple[NormalEntry, int] | None:
    """pos から1口を読み、口と次の口の開始位置を返す."""
    first = read_horse_number(code, pos + 1)
    second = None
    third = None
    is_reversed = False

    if bet_type in (BetType.WIN, BetType.PLACE):
        stake_pos = pos + 5
    elif bet_type == BetType.EXACTA:
        second = read_horse_number(code, pos + 3)
        flag = code.slice(pos + 5, pos + 7)
        is_reversed = flag is not None and int(flag) == 1
        stake_pos = pos + 7
    elif bet_type in _PAIR_WITH_SENTINEL:
        second = read_horse_number(code, pos + 3)
        stake_pos = pos + 7
    else:
        second = read_horse_number(code, pos + 3)
        third = read_horse_number(code, pos + 5)
        stake_pos = pos + 7

    stake = read_stake(code, stake_pos)
    if stake is None:
        return None
    # 裏ありの馬単は表裏2点分
    if is_reversed:
        stake = stake.multiply(2)

    entry = NormalEntry(
        bet_type=bet_type,
        first_place=first,
        second_place=second,
        third_place=third,
        is_reversed=is_reversed,
        investment=stake,
    )
    return entry, stake_pos + 5


def decode_normal_entries(code: RawCode | str) -> tuple[NormalEntry, ...]:
    """通常・応援馬券の全口を解析する（口がなければ空）."""
    raw = RawCode.of(code)
    if len(raw) < MIN_NORMAL_CODE_LENGTH:
        return ()

    entries: list[NormalEntry] = []
    pos = NORMAL_ENTRIES_START
    while pos < len(raw):
        bet_type = BetType.from_code(raw.char_at(pos))
        if bet_type is None:
            break
        decoded = _decode_entry(raw, pos, bet_type)
        if decoded is None:
            break
        entry, pos = decoded
        entries.append(entry)
    return tuple(entries)
