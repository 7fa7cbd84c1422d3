"""収支レコードリポジトリのインメモリ実装."""
from datetime import date

from baken_scan.domain.entities import BetRecord
from baken_scan.domain.enums import Venue
from baken_scan.domain.identifiers import BetRecordId
from baken_scan.domain.ports import BetRecordRepository


class InMemoryBetRecordRepository(BetRecordRepository):
    """収支レコードリポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._records: dict[str, BetRecord] = {}

    def save(self, record: BetRecord) -> None:
        """収支レコードを保存する."""
        self._records[record.record_id.value] = record

    def find_by_id(self, record_id: BetRecordId) -> BetRecord | None:
        """IDで検索する."""
        return self._records.get(record_id.value)

    def find_all(self) -> list[BetRecord]:
        """全件を購入日時の新しい順で取得する."""
        return self._sorted(list(self._records.values()))

    def find_by_date_range(self, from_date: date, to_date: date) -> list[BetRecord]:
        """購入日の範囲で検索する（両端を含む）."""
        return self._sorted([
            r for r in self._records.values()
            if from_date <= r.purchased_at.date() <= to_date
        ])

    def find_by_venue(self, venue: Venue) -> list[BetRecord]:
        """競馬場で検索する."""
        return self._sorted([r for r in self._records.values() if r.venue == venue])

    def delete(self, record_id: BetRecordId) -> bool:
        """削除する."""
        return self._records.pop(record_id.value, None) is not None

    @staticmethod
    def _sorted(records: list[BetRecord]) -> list[BetRecord]:
        return sorted(records, key=lambda r: r.purchased_at, reverse=True)
