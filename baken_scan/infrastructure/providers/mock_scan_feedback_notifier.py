"""読み取り通知のモック実装."""
from baken_scan.domain.ports import ScanFeedbackNotifier
from baken_scan.domain.value_objects import DecodedTicket


class MockScanFeedbackNotifier(ScanFeedbackNotifier):
    """読み取り通知のモック実装（テスト用、通知履歴を保持）."""

    def __init__(self) -> None:
        """初期化."""
        self._notified: list[DecodedTicket] = []

    def notify_accepted(self, ticket: DecodedTicket) -> None:
        """通知を記録する."""
        self._notified.append(ticket)

    @property
    def notified(self) -> list[DecodedTicket]:
        """通知された馬券（防御的コピー）."""
        return list(self._notified)
