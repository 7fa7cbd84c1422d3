"""買い目領域で共通に使う項目の読み取り."""
from ..value_objects import Money, RawCode
from ..value_objects.money import STAKE_FIELD_WIDTH

MAX_HORSE_NUMBER = 18
HORSE_BITMAP_WIDTH = 18
HORSE_NUMBER_WIDTH = 2


def parse_horse_number(digits: str | None) -> int | None:
    """2桁の馬番を読む（1-18以外はNone）."""
    if digits is None:
        return None
    number = int(digits)
    if 1 <= number <= MAX_HORSE_NUMBER:
        return number
    return None


def read_horse_number(code: RawCode, start: int) -> int | None:
    """start から2桁の馬番を読む."""
    return parse_horse_number(code.slice(start, start + HORSE_NUMBER_WIDTH))


def read_stake(code: RawCode, start: int) -> Money | None:
    """start から5桁の金額欄を読む（桁不足はNone）."""
    digits = code.slice(start, start + STAKE_FIELD_WIDTH)
    if digits is None:
        return None
    return Money.from_stake_field(digits)


def read_horse_bitmap(code: RawCode, start: int) -> tuple[int, ...]:
    """start から18桁の選択ビットマップを読む.

    i桁目が "1" なら馬番 i+1 が選択されている。桁不足の場合は空。
    """
    bits = code.slice(start, start + HORSE_BITMAP_WIDTH)
    if bits is None:
        return ()
    return tuple(i + 1 for i, bit in enumerate(bits) if bit == "1")
