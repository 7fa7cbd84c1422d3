"""通常・応援馬券の買い目を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import BetType
from .money import Money


@dataclass(frozen=True)
class NormalEntry:
    """通常・応援馬券の1口分."""

    bet_type: BetType
    first_place: int | None
    second_place: int | None
    third_place: int | None
    is_reversed: bool
    investment: Money

    def horse_numbers(self) -> tuple[int, ...]:
        """記載されている馬番を着順に返す."""
        places = (self.first_place, self.second_place, self.third_place)
        return tuple(n for n in places if n is not None)

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "bet_type": self.bet_type.value,
            "bet_type_name": self.bet_type.get_display_name(),
            "first_place": self.first_place,
            "second_place": self.second_place,
            "third_place": self.third_place,
            "is_reversed": self.is_reversed,
            "investment": self.investment.value,
        }


@dataclass(frozen=True)
class NormalSelection:
    """通常・応援馬券の全口."""

    entries: tuple[NormalEntry, ...]

    @property
    def total_investment(self) -> Money:
        """各口の金額の合計."""
        total = Money.zero()
        for entry in self.entries:
            total = total.add(entry.investment)
        return total

    @property
    def primary_bet_type(self) -> BetType | None:
        """一口目の券種."""
        if not self.entries:
            return None
        return self.entries[0].bet_type

    def is_empty(self) -> bool:
        """口が1つもないか判定."""
        return not self.entries

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "kind": "normal",
            "entries": [entry.to_dict() for entry in self.entries],
            "total_investment": self.total_investment.value,
        }
