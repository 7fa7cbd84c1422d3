"""スキャン結果の不採用理由の列挙型."""
from enum import Enum


class ScanRejectionReason(Enum):
    """読み取ったフレームを採用しなかった理由."""

    NON_NUMERIC = "non_numeric"
    TOO_SHORT = "too_short"
    DEBOUNCED = "debounced"
    DUPLICATE_TICKET = "duplicate_ticket"
    INVALID_TICKET = "invalid_ticket"

    def is_silent(self) -> bool:
        """利用者に通知せず破棄する理由か判定."""
        return self != ScanRejectionReason.INVALID_TICKET
