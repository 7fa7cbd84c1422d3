"""ポートモジュール."""
from .bet_record_repository import BetRecordRepository
from .scan_event_listener import ScanEventListener
from .scan_feedback_notifier import ScanFeedbackNotifier

__all__ = [
    "BetRecordRepository",
    "ScanEventListener",
    "ScanFeedbackNotifier",
]
