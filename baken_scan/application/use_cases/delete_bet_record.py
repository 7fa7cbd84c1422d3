"""収支レコード削除ユースケース."""
from baken_scan.domain.identifiers import BetRecordId
from baken_scan.domain.ports import BetRecordRepository


class BetRecordNotFoundError(Exception):
    """収支レコードが見つからないエラー."""

    pass


class DeleteBetRecordUseCase:
    """収支レコード削除ユースケース."""

    def __init__(self, bet_record_repository: BetRecordRepository) -> None:
        """初期化."""
        self._bet_record_repository = bet_record_repository

    def execute(self, record_id: str) -> None:
        """収支レコードを削除する."""
        if not self._bet_record_repository.delete(BetRecordId(record_id)):
            raise BetRecordNotFoundError(f"Bet record not found: {record_id}")
