"""馬券QRコード読み取りユースケース."""
import logging
from datetime import datetime

from baken_scan.domain.entities import ScanSession
from baken_scan.domain.enums import ScanRejectionReason
from baken_scan.domain.ports import ScanEventListener, ScanFeedbackNotifier
from baken_scan.domain.services import (
    MIN_HEADER_LENGTH,
    TicketDecoder,
    TicketValidator,
    extract_ticket_number,
)
from baken_scan.domain.value_objects import RawCode, ScanOutcome, is_digit_string

logger = logging.getLogger(__name__)

_LOG_PREFIX_LENGTH = 50


class ScanTicketUseCase:
    """カメラから届いたフレームを1枚の馬券につき1回だけ採用する.

    フレームは1つずつ同期的に渡される前提で、上流での重複排除や間引きは仮定しない。
    状態は呼び出し側が渡す ScanSession にだけ持つ。
    """

    def __init__(
        self,
        decoder: TicketDecoder,
        validator: TicketValidator,
        notifier: ScanFeedbackNotifier,
        listener: ScanEventListener | None = None,
    ) -> None:
        """初期化."""
        self._decoder = decoder
        self._validator = validator
        self._notifier = notifier
        self._listener = listener

    def execute(
        self, session: ScanSession, raw_frame: str, now: datetime | None = None
    ) -> ScanOutcome:
        """1フレームを処理する."""
        now = now or datetime.now()

        if not is_digit_string(raw_frame):
            logger.debug("Ignoring non-numeric frame")
            return self._deliver(ScanOutcome.reject(ScanRejectionReason.NON_NUMERIC))
        if len(raw_frame) < MIN_HEADER_LENGTH:
            logger.debug("Ignoring short frame: %d digits", len(raw_frame))
            return self._deliver(ScanOutcome.reject(ScanRejectionReason.TOO_SHORT))

        if session.is_debounced(now):
            logger.debug("Ignoring frame within debounce window")
            return self._deliver(ScanOutcome.reject(ScanRejectionReason.DEBOUNCED))

        code = RawCode(raw_frame)
        ticket_number = extract_ticket_number(code)
        if session.has_accepted(ticket_number):
            logger.debug("Ignoring already accepted ticket: %s", ticket_number)
            return self._deliver(ScanOutcome.reject(ScanRejectionReason.DUPLICATE_TICKET))

        ticket = self._decoder.decode(code)
        result = self._validator.validate(ticket)
        if not result.is_valid:
            logger.warning(
                "Invalid ticket %s...: %s",
                raw_frame[:_LOG_PREFIX_LENGTH],
                "; ".join(result.errors),
            )
            return self._deliver(
                ScanOutcome.reject(ScanRejectionReason.INVALID_TICKET, decoded=ticket)
            )

        session.record_acceptance(ticket_number, now)
        logger.info(
            "Accepted ticket %s (total %s)", ticket_number, ticket.total_investment
        )
        self._notifier.notify_accepted(ticket)
        return self._deliver(ScanOutcome.accept(ticket))

    def reset(self, session: ScanSession) -> None:
        """待機時間をリセットする（採用済みの発券通番は保持）."""
        session.reset()

    def _deliver(self, outcome: ScanOutcome) -> ScanOutcome:
        """黙って破棄する理由以外の結果をリスナーに渡す."""
        silent = outcome.reason is not None and outcome.reason.is_silent()
        if self._listener is not None and not silent:
            self._listener.on_scan_outcome(outcome)
        return outcome
