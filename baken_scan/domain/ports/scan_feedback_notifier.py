"""読み取り通知インターフェース."""
from abc import ABC, abstractmethod

from ..value_objects import DecodedTicket


class ScanFeedbackNotifier(ABC):
    """馬券を採用したことを利用者に知らせる（振動など）インターフェース."""

    @abstractmethod
    def notify_accepted(self, ticket: DecodedTicket) -> None:
        """採用時の通知を行う."""
        pass
