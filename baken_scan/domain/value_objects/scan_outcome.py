"""スキャン結果を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import ScanRejectionReason
from .decoded_ticket import DecodedTicket

INVALID_TICKET_MESSAGE = "QRコードから必要な情報を読み取れませんでした"


@dataclass(frozen=True)
class ScanOutcome:
    """1フレーム分の読み取り結果."""

    decoded: DecodedTicket | None
    accepted: bool
    reason: ScanRejectionReason | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.accepted and (self.decoded is None or self.reason is not None):
            raise ValueError("Accepted outcome requires a decoded ticket and no reason")
        if not self.accepted and self.reason is None:
            raise ValueError("Rejected outcome requires a reason")

    @classmethod
    def accept(cls, decoded: DecodedTicket) -> ScanOutcome:
        """採用結果を生成する."""
        return cls(decoded=decoded, accepted=True)

    @classmethod
    def reject(
        cls, reason: ScanRejectionReason, decoded: DecodedTicket | None = None
    ) -> ScanOutcome:
        """不採用結果を生成する."""
        message = None if reason.is_silent() else INVALID_TICKET_MESSAGE
        return cls(decoded=decoded, accepted=False, reason=reason, message=message)

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "decoded": self.decoded.to_dict() if self.decoded is not None else None,
            "accepted": self.accepted,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
        }
