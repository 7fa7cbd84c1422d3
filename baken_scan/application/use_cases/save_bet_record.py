"""収支レコード保存ユースケース."""
from datetime import datetime

from baken_scan.domain.entities import BetRecord
from baken_scan.domain.ports import BetRecordRepository
from baken_scan.domain.value_objects import BetRecordDraft, Money


class IncompleteBetRecordError(Exception):
    """必須項目が不足しているエラー."""

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(f"Missing required fields: {', '.join(missing_fields)}")
        self.missing_fields = missing_fields


class SaveBetRecordUseCase:
    """収支レコード保存ユースケース."""

    def __init__(self, bet_record_repository: BetRecordRepository) -> None:
        """初期化."""
        self._bet_record_repository = bet_record_repository

    def execute(
        self,
        draft: BetRecordDraft,
        purchased_at: datetime | None = None,
        payout: int = 0,
    ) -> BetRecord:
        """入力初期値から収支レコードを作成して保存する."""
        missing = draft.missing_fields()
        if missing:
            raise IncompleteBetRecordError(missing)

        record = BetRecord.from_draft(
            draft,
            purchased_at=purchased_at or datetime.now(),
            payout=Money.of(payout),
        )
        self._bet_record_repository.save(record)
        return record
