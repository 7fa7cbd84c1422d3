"""収支レコードエンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..enums import BetType, Venue
from ..identifiers import BetRecordId
from ..value_objects import BetRecordDraft, Money


@dataclass
class BetRecord:
    """馬券1枚分の収支."""

    record_id: BetRecordId
    purchased_at: datetime
    venue: Venue
    race_number: int
    bet_type: BetType
    investment: Money
    payout: Money

    def __post_init__(self) -> None:
        """バリデーション."""
        if not 1 <= self.race_number <= 12:
            raise ValueError("レース番号は1から12の範囲である必要があります")

    @classmethod
    def create(
        cls,
        purchased_at: datetime,
        venue: Venue,
        race_number: int,
        bet_type: BetType,
        investment: Money,
        payout: Money | None = None,
    ) -> BetRecord:
        """新しい収支レコードを作成する."""
        return cls(
            record_id=BetRecordId.generate(),
            purchased_at=purchased_at,
            venue=venue,
            race_number=race_number,
            bet_type=bet_type,
            investment=investment,
            payout=payout or Money.zero(),
        )

    @classmethod
    def from_draft(
        cls,
        draft: BetRecordDraft,
        purchased_at: datetime,
        payout: Money | None = None,
    ) -> BetRecord:
        """入力初期値から作成する（必須項目が欠けていればValueError）."""
        missing = draft.missing_fields()
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")
        return cls.create(
            purchased_at=purchased_at,
            venue=draft.venue,
            race_number=draft.race_number,
            bet_type=draft.bet_type,
            investment=Money.of(draft.investment),
            payout=payout,
        )

    def update_payout(self, payout: Money) -> None:
        """回収額を更新する."""
        self.payout = payout

    def get_profit(self) -> int:
        """収支（回収額 − 投資額）."""
        return self.payout.value - self.investment.value

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "record_id": self.record_id.value,
            "purchased_at": self.purchased_at.isoformat(),
            "venue": self.venue.get_display_name(),
            "race_number": self.race_number,
            "bet_type": self.bet_type.value,
            "investment": self.investment.value,
            "payout": self.payout.value,
            "profit": self.get_profit(),
        }
