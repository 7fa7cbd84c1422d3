"""馬券QRコード解析ユースケース."""
from dataclasses import dataclass

from baken_scan.domain.services import TicketDecoder, TicketValidator, ValidationResult
from baken_scan.domain.value_objects import BetRecordDraft, DecodedTicket


@dataclass(frozen=True)
class DecodeTicketResult:
    """解析結果."""

    ticket: DecodedTicket
    validation: ValidationResult
    draft: BetRecordDraft


class DecodeTicketUseCase:
    """QRコード1件を解析し、有効性と収支レコードの初期値を返す."""

    def __init__(self, decoder: TicketDecoder, validator: TicketValidator) -> None:
        """初期化."""
        self._decoder = decoder
        self._validator = validator

    def execute(self, raw_code: str) -> DecodeTicketResult:
        """QRコードを解析する（数字列でなければNonNumericInputError）."""
        ticket = self._decoder.decode(raw_code)
        return DecodeTicketResult(
            ticket=ticket,
            validation=self._validator.validate(ticket),
            draft=ticket.to_bet_record_draft(),
        )
