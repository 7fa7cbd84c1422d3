"""ログ出力による読み取り通知の実装."""
import logging

from baken_scan.domain.ports import ScanFeedbackNotifier
from baken_scan.domain.value_objects import DecodedTicket

logger = logging.getLogger(__name__)


class LoggingScanFeedbackNotifier(ScanFeedbackNotifier):
    """採用をログに記録する通知（振動を出せない環境向け）."""

    def notify_accepted(self, ticket: DecodedTicket) -> None:
        """採用時の通知を行う."""
        logger.info("Scan feedback: ticket %s accepted", ticket.ticket_number)
