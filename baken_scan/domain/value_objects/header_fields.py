"""QRコードの共通ヘッダー項目を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import BuyMethod, Venue


@dataclass(frozen=True)
class HeaderFields:
    """買い方によらず固定位置にある項目.

    各項目は独立に省略可能で、範囲外や桁不足の項目だけが None になる。
    """

    venue: Venue | None = None
    race_number: int | None = None
    year: int | None = None
    round: int | None = None
    day: int | None = None
    buy_method: BuyMethod | None = None
    ticket_number: str | None = None
    sales_location: str | None = None
    machine_code: str | None = None

    @classmethod
    def empty(cls) -> HeaderFields:
        """全項目が欠けたヘッダーを生成する."""
        return cls()

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "venue": self.venue.get_display_name() if self.venue else None,
            "race_number": self.race_number,
            "year": self.year,
            "round": self.round,
            "day": self.day,
            "buy_method": self.buy_method.value if self.buy_method is not None else None,
            "ticket_number": self.ticket_number,
            "sales_location": self.sales_location,
            "machine_code": self.machine_code,
        }
