"""ながしの買い目を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import BetType
from .money import Money


@dataclass(frozen=True)
class NagashiSelection:
    """ながしの軸馬・相手馬と金額."""

    bet_type: BetType
    nagashi_type: int
    axis1: tuple[int, ...]
    axis2: tuple[int, ...]
    opponents: tuple[int, ...]
    unit_stake: Money
    pattern_count: int
    is_multi: bool = False

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.pattern_count < 0:
            raise ValueError("pattern_count cannot be negative")

    @property
    def total_investment(self) -> Money:
        """1点あたりの金額 × 点数."""
        return self.unit_stake.multiply(self.pattern_count)

    @property
    def primary_bet_type(self) -> BetType:
        return self.bet_type

    def is_two_axis(self) -> bool:
        """軸2頭ながしか判定."""
        return bool(self.axis2)

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "kind": "nagashi",
            "bet_type": self.bet_type.value,
            "nagashi_type": self.nagashi_type,
            "axis1": list(self.axis1),
            "axis2": list(self.axis2),
            "opponents": list(self.opponents),
            "unit_stake": self.unit_stake.value,
            "pattern_count": self.pattern_count,
            "is_multi": self.is_multi,
            "total_investment": self.total_investment.value,
        }
