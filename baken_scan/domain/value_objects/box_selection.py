"""ボックスの買い目を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import BetType
from .money import Money


@dataclass(frozen=True)
class BoxSelection:
    """ボックスの選択馬と金額."""

    bet_type: BetType
    horse_numbers: tuple[int, ...]
    unit_stake: Money

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.horse_numbers:
            raise ValueError("BoxSelection requires at least one horse")
        if any(not 1 <= n <= 18 for n in self.horse_numbers):
            raise ValueError("馬番は1から18の範囲である必要があります")

    @property
    def total_investment(self) -> Money:
        """ボックスは記載金額がそのまま合計になる."""
        return self.unit_stake

    @property
    def primary_bet_type(self) -> BetType:
        return self.bet_type

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "kind": "box",
            "bet_type": self.bet_type.value,
            "horse_numbers": list(self.horse_numbers),
            "unit_stake": self.unit_stake.value,
            "total_investment": self.total_investment.value,
        }
