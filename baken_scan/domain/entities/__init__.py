"""エンティティモジュール."""
from .bet_record import BetRecord
from .scan_session import DEFAULT_DEBOUNCE_WINDOW, ScanSession

__all__ = [
    "BetRecord",
    "DEFAULT_DEBOUNCE_WINDOW",
    "ScanSession",
]
