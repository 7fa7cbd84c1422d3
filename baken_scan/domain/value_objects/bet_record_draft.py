"""収支レコード入力の初期値を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, replace

from ..enums import BetType, Venue


@dataclass(frozen=True)
class BetRecordDraft:
    """QRコードから読み取った、収支レコードの入力初期値."""

    venue: Venue | None = None
    race_number: int | None = None
    bet_type: BetType | None = None
    investment: int | None = None

    def with_overrides(
        self,
        venue: Venue | None = None,
        race_number: int | None = None,
        bet_type: BetType | None = None,
        investment: int | None = None,
    ) -> BetRecordDraft:
        """指定された項目だけを上書きした初期値を返す."""
        changes = {
            "venue": venue,
            "race_number": race_number,
            "bet_type": bet_type,
            "investment": investment,
        }
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def missing_fields(self) -> list[str]:
        """未入力の必須項目名を返す."""
        return [
            name
            for name in ("venue", "race_number", "bet_type", "investment")
            if getattr(self, name) is None
        ]

    def is_complete(self) -> bool:
        """必須項目が揃っているか判定."""
        return not self.missing_fields()

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "venue": self.venue.get_display_name() if self.venue else None,
            "race_number": self.race_number,
            "bet_type": self.bet_type.value if self.bet_type else None,
            "investment": self.investment,
        }
