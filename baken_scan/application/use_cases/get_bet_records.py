"""収支レコード取得ユースケース."""
from datetime import date
from typing import Optional

from baken_scan.domain.entities import BetRecord
from baken_scan.domain.enums import Venue
from baken_scan.domain.ports import BetRecordRepository


class GetBetRecordsUseCase:
    """収支レコード取得ユースケース."""

    def __init__(self, bet_record_repository: BetRecordRepository) -> None:
        """初期化."""
        self._bet_record_repository = bet_record_repository

    def execute(
        self,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        venue: Optional[str] = None,
    ) -> list[BetRecord]:
        """収支レコードを取得する（期間・競馬場で絞り込み）."""
        target = Venue.from_display_name(venue) if venue else None
        if date_from or date_to:
            from_date = date.fromisoformat(date_from) if date_from else date.min
            to_date = date.fromisoformat(date_to) if date_to else date.max
            records = self._bet_record_repository.find_by_date_range(from_date, to_date)
            if target is not None:
                records = [r for r in records if r.venue == target]
            return records
        if target is not None:
            return self._bet_record_repository.find_by_venue(target)
        return self._bet_record_repository.find_all()
