"""識別子モジュール."""
from .bet_record_id import BetRecordId
from .scan_session_id import ScanSessionId

__all__ = [
    "BetRecordId",
    "ScanSessionId",
]
