"""プロバイダー実装モジュール."""
from .logging_scan_feedback_notifier import LoggingScanFeedbackNotifier
from .mock_scan_feedback_notifier import MockScanFeedbackNotifier
from .scan_feedback_notifier_factory import create_scan_feedback_notifier

__all__ = [
    "LoggingScanFeedbackNotifier",
    "MockScanFeedbackNotifier",
    "create_scan_feedback_notifier",
]
