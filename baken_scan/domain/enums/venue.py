"""競馬場の列挙型."""
from __future__ import annotations

from enum import Enum


class Venue(Enum):
    """JRAの競馬場（QRコード2-3桁目の競馬場コード）."""

    SAPPORO = "01"
    HAKODATE = "02"
    FUKUSHIMA = "03"
    NIIGATA = "04"
    TOKYO = "05"
    NAKAYAMA = "06"
    CHUKYO = "07"
    KYOTO = "08"
    HANSHIN = "09"
    KOKURA = "10"

    @classmethod
    def from_code(cls, code: str | None) -> Venue | None:
        """2桁の競馬場コードからVenueに変換する（該当なしはNone）."""
        for venue in cls:
            if venue.value == code:
                return venue
        return None

    @classmethod
    def from_display_name(cls, name: str) -> Venue:
        """日本語表示名からVenueに変換する."""
        for venue in cls:
            if venue.get_display_name() == name:
                return venue
        raise ValueError(f"Unknown venue name: {name}")

    def get_display_name(self) -> str:
        """日本語表示名を返す."""
        names = {
            Venue.SAPPORO: "札幌",
            Venue.HAKODATE: "函館",
            Venue.FUKUSHIMA: "福島",
            Venue.NIIGATA: "新潟",
            Venue.TOKYO: "東京",
            Venue.NAKAYAMA: "中山",
            Venue.CHUKYO: "中京",
            Venue.KYOTO: "京都",
            Venue.HANSHIN: "阪神",
            Venue.KOKURA: "小倉",
        }
        return names[self]
