"""券種の列挙型."""
from __future__ import annotations

from enum import Enum


class BetType(Enum):
    """馬券の券種（式別）."""

    WIN = "win"
    PLACE = "place"
    BRACKET_QUINELLA = "bracket_quinella"
    QUINELLA = "quinella"
    EXACTA = "exacta"
    QUINELLA_PLACE = "quinella_place"
    TRIO = "trio"
    TRIFECTA = "trifecta"

    @classmethod
    def from_code(cls, code: str | None) -> BetType | None:
        """QRコードの式別コード（1桁）からBetTypeに変換する.

        0 と 4 は未使用。該当しないコードは None を返す。
        """
        if code is None:
            return None
        return _CODE_TO_BET_TYPE.get(code)

    def get_display_name(self) -> str:
        """日本語表示名を返す."""
        names = {
            BetType.WIN: "単勝",
            BetType.PLACE: "複勝",
            BetType.BRACKET_QUINELLA: "枠連",
            BetType.QUINELLA: "馬連",
            BetType.EXACTA: "馬単",
            BetType.QUINELLA_PLACE: "ワイド",
            BetType.TRIO: "3連複",
            BetType.TRIFECTA: "3連単",
        }
        return names[self]

    def get_required_count(self) -> int:
        """1点あたりの必要頭数を返す."""
        if self in (BetType.WIN, BetType.PLACE):
            return 1
        if self in (BetType.TRIO, BetType.TRIFECTA):
            return 3
        return 2

    def is_order_required(self) -> bool:
        """着順の指定が必要か判定."""
        return self in (BetType.EXACTA, BetType.TRIFECTA)

    def is_triple(self) -> bool:
        """3頭を選ぶ券種か判定."""
        return self.get_required_count() == 3


_CODE_TO_BET_TYPE = {
    "1": BetType.WIN,
    "2": BetType.PLACE,
    "3": BetType.BRACKET_QUINELLA,
    "5": BetType.QUINELLA,
    "6": BetType.EXACTA,
    "7": BetType.QUINELLA_PLACE,
    "8": BetType.TRIO,
    "9": BetType.TRIFECTA,
}
