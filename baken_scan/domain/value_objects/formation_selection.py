"""フォーメーションの買い目を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import BetType
from .money import Money


@dataclass(frozen=True)
class FormationSelection:
    """着順ごとの選択馬と金額."""

    bet_type: BetType
    first_place: tuple[int, ...]
    second_place: tuple[int, ...]
    third_place: tuple[int, ...]
    unit_stake: Money
    pattern_count: int

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

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "kind": "formation",
            "bet_type": self.bet_type.value,
            "first_place": list(self.first_place),
            "second_place": list(self.second_place),
            "third_place": list(self.third_place),
            "unit_stake": self.unit_stake.value,
            "pattern_count": self.pattern_count,
            "total_investment": self.total_investment.value,
        }
