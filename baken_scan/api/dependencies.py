"""依存性注入コンテナ."""
import logging
import os
from datetime import timedelta

from baken_scan.application.use_cases import ScanTicketUseCase
from baken_scan.domain.entities import DEFAULT_DEBOUNCE_WINDOW, ScanSession
from baken_scan.domain.ports import BetRecordRepository, ScanEventListener, ScanFeedbackNotifier
from baken_scan.domain.services import TicketDecoder, TicketValidator
from baken_scan.infrastructure import InMemoryBetRecordRepository, create_scan_feedback_notifier

logger = logging.getLogger(__name__)


def _use_dynamodb() -> bool:
    """DynamoDBを使用するか判定する."""
    return os.environ.get("BET_RECORD_TABLE_NAME") is not None


def _debounce_window() -> timedelta:
    """SCAN_DEBOUNCE_MS から連続読み取りの待機時間を決める."""
    value = os.environ.get("SCAN_DEBOUNCE_MS")
    if value is None:
        return DEFAULT_DEBOUNCE_WINDOW
    try:
        millis = int(value)
    except ValueError:
        millis = -1
    if millis < 0:
        logger.warning("Invalid SCAN_DEBOUNCE_MS=%s, using default", value)
        return DEFAULT_DEBOUNCE_WINDOW
    return timedelta(milliseconds=millis)


class Dependencies:
    """依存性を管理するコンテナ.

    BET_RECORD_TABLE_NAME 環境変数が設定されている場合はDynamoDB実装を使用。
    そうでない場合はインメモリ実装を使用（ローカル開発・テスト用）。
    """

    _bet_record_repository: BetRecordRepository | None = None
    _scan_feedback_notifier: ScanFeedbackNotifier | None = None
    _ticket_decoder: TicketDecoder | None = None
    _ticket_validator: TicketValidator | None = None

    @classmethod
    def get_bet_record_repository(cls) -> BetRecordRepository:
        """収支レコードリポジトリを取得する."""
        if cls._bet_record_repository is None:
            if _use_dynamodb():
                from baken_scan.infrastructure.repositories.dynamodb_bet_record_repository import (
                    DynamoDBBetRecordRepository,
                )

                cls._bet_record_repository = DynamoDBBetRecordRepository()
            else:
                cls._bet_record_repository = InMemoryBetRecordRepository()
        return cls._bet_record_repository

    @classmethod
    def set_bet_record_repository(cls, repository: BetRecordRepository) -> None:
        """収支レコードリポジトリを設定する（テスト用）."""
        cls._bet_record_repository = repository

    @classmethod
    def get_scan_feedback_notifier(cls) -> ScanFeedbackNotifier:
        """読み取り通知を取得する."""
        if cls._scan_feedback_notifier is None:
            cls._scan_feedback_notifier = create_scan_feedback_notifier()
        return cls._scan_feedback_notifier

    @classmethod
    def set_scan_feedback_notifier(cls, notifier: ScanFeedbackNotifier) -> None:
        """読み取り通知を設定する（テスト用）."""
        cls._scan_feedback_notifier = notifier

    @classmethod
    def get_ticket_decoder(cls) -> TicketDecoder:
        """QRコード解析サービスを取得する."""
        if cls._ticket_decoder is None:
            cls._ticket_decoder = TicketDecoder()
        return cls._ticket_decoder

    @classmethod
    def get_ticket_validator(cls) -> TicketValidator:
        """有効性検証サービスを取得する."""
        if cls._ticket_validator is None:
            cls._ticket_validator = TicketValidator()
        return cls._ticket_validator

    @staticmethod
    def create_scan_session() -> ScanSession:
        """環境変数の待機時間で新しいスキャンセッションを作成する."""
        return ScanSession.create(debounce_window=_debounce_window())

    @classmethod
    def create_scan_ticket_use_case(
        cls, listener: ScanEventListener | None = None
    ) -> ScanTicketUseCase:
        """読み取りユースケースを組み立てる."""
        return ScanTicketUseCase(
            decoder=cls.get_ticket_decoder(),
            validator=cls.get_ticket_validator(),
            notifier=cls.get_scan_feedback_notifier(),
            listener=listener,
        )

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._bet_record_repository = None
        cls._scan_feedback_notifier = None
        cls._ticket_decoder = None
        cls._ticket_validator = None
