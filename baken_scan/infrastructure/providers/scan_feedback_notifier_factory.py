"""ScanFeedbackNotifier ファクトリ."""
import logging
import os

from baken_scan.domain.ports import ScanFeedbackNotifier

logger = logging.getLogger(__name__)


def create_scan_feedback_notifier() -> ScanFeedbackNotifier:
    """環境変数に基づいてScanFeedbackNotifierを生成する.

    SCAN_FEEDBACK_NOTIFIER:
        "mock"    → MockScanFeedbackNotifier（テスト用）
        "logging" → LoggingScanFeedbackNotifier
        未設定     → LoggingScanFeedbackNotifier（デフォルト）
    """
    notifier_type = os.environ.get("SCAN_FEEDBACK_NOTIFIER")
    if notifier_type == "mock":
        from baken_scan.infrastructure.providers.mock_scan_feedback_notifier import (
            MockScanFeedbackNotifier,
        )

        return MockScanFeedbackNotifier()

    if notifier_type and notifier_type != "logging":
        logger.warning("Unknown SCAN_FEEDBACK_NOTIFIER=%s, falling back to logging", notifier_type)

    from baken_scan.infrastructure.providers.logging_scan_feedback_notifier import (
        LoggingScanFeedbackNotifier,
    )

    return LoggingScanFeedbackNotifier()
