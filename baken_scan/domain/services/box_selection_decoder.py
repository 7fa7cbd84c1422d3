"""ボックスの解析.

    [43]     式別
    [44:66]  選択馬番（2桁ずつ最大11頭、"00" で終了）
    [66:71]  金額（100円単位）
"""
from ..enums import BetType
from ..value_objects import BoxSelection, RawCode
from .code_fields import HORSE_NUMBER_WIDTH, MAX_HORSE_NUMBER, read_stake

BOX_BET_TYPE_POS = 43
BOX_HORSES_START = 44
BOX_HORSES_END = 66
BOX_STAKE_POS = 66
MIN_BOX_CODE_LENGTH = 71


def read_box_horse_numbers(code: RawCode) -> tuple[int, ...]:
    """選択馬番を "00" または欄の終わりまで読む."""
    horses: list[int] = []
    for pos in range(BOX_HORSES_START, BOX_HORSES_END, HORSE_NUMBER_WIDTH):
        digits = code.slice(pos, pos + HORSE_NUMBER_WIDTH)
        if digits is None:
            break
        number = int(digits)
        if number == 0:
            break
        if number <= MAX_HORSE_NUMBER:
            horses.append(number)
    return tuple(horses)


def decode_box_selection(code: RawCode | str) -> BoxSelection | None:
    """ボックスの選択情報を解析する（読み取れない場合はNone）."""
    raw = RawCode.of(code)
    if len(raw) < MIN_BOX_CODE_LENGTH:
        return None

    bet_type = BetType.from_code(raw.char_at(BOX_BET_TYPE_POS))
    if bet_type is None:
        return None

    horses = read_box_horse_numbers(raw)
    if not horses:
        return None

    stake = read_stake(raw, BOX_STAKE_POS)
    if stake is None:
        return None
    return BoxSelection(bet_type=bet_type, horse_numbers=horses, unit_stake=stake)
