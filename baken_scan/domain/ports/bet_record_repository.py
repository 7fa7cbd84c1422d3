"""収支レコードリポジトリインターフェース."""
from abc import ABC, abstractmethod
from datetime import date

from ..entities import BetRecord
from ..enums import Venue
from ..identifiers import BetRecordId


class BetRecordRepository(ABC):
    """収支レコードリポジトリのインターフェース."""

    @abstractmethod
    def save(self, record: BetRecord) -> None:
        """収支レコードを保存する."""
        pass

    @abstractmethod
    def find_by_id(self, record_id: BetRecordId) -> BetRecord | None:
        """IDで検索する."""
        pass

    @abstractmethod
    def find_all(self) -> list[BetRecord]:
        """全件を購入日時の新しい順で取得する."""
        pass

    @abstractmethod
    def find_by_date_range(self, from_date: date, to_date: date) -> list[BetRecord]:
        """購入日の範囲で検索する（両端を含む）."""
        pass

    @abstractmethod
    def find_by_venue(self, venue: Venue) -> list[BetRecord]:
        """競馬場で検索する."""
        pass

    @abstractmethod
    def delete(self, record_id: BetRecordId) -> bool:
        """削除する（削除できたらTrue）."""
        pass
