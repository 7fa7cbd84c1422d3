"""買い方の列挙型."""
from __future__ import annotations

from enum import Enum


class BuyMethod(Enum):
    """馬券の買い方（QRコード15桁目）."""

    NORMAL = 0
    BOX = 1
    NAGASHI = 2
    FORMATION = 3
    QUICK_PICK = 4
    CHEER = 5

    @classmethod
    def from_digit(cls, digit: str | None) -> BuyMethod | None:
        """1桁の数字からBuyMethodに変換する（該当なしはNone）."""
        if digit is None or not digit.isdigit():
            return None
        for method in cls:
            if method.value == int(digit):
                return method
        return None

    def is_supported(self) -> bool:
        """解析に対応している買い方か判定（クイックピックは非対応）."""
        return self != BuyMethod.QUICK_PICK

    def uses_entry_list(self) -> bool:
        """通常・応援馬券のように口ごとに記録される買い方か判定."""
        return self in (BuyMethod.NORMAL, BuyMethod.CHEER)

    def get_display_name(self) -> str:
        """日本語表示名を返す."""
        names = {
            BuyMethod.NORMAL: "通常",
            BuyMethod.BOX: "ボックス",
            BuyMethod.NAGASHI: "ながし",
            BuyMethod.FORMATION: "フォーメーション",
            BuyMethod.QUICK_PICK: "クイックピック",
            BuyMethod.CHEER: "応援馬券",
        }
        return names[self]
