"""インフラストラクチャ層モジュール."""
# DynamoDBBetRecordRepository は boto3 に依存するため、必要な時に
# baken_scan.infrastructure.repositories.dynamodb_bet_record_repository から直接インポートする
from .providers import (
    LoggingScanFeedbackNotifier,
    MockScanFeedbackNotifier,
    create_scan_feedback_notifier,
)
from .repositories import InMemoryBetRecordRepository

__all__ = [
    "InMemoryBetRecordRepository",
    "LoggingScanFeedbackNotifier",
    "MockScanFeedbackNotifier",
    "create_scan_feedback_notifier",
]
