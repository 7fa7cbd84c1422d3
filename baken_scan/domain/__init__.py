"""ドメイン層モジュール."""
from .entities import BetRecord, ScanSession
from .enums import BetType, BuyMethod, DecodeIssueKind, ScanRejectionReason, Venue
from .identifiers import BetRecordId, ScanSessionId
from .ports import BetRecordRepository, ScanEventListener, ScanFeedbackNotifier
from .services import TicketDecoder, TicketValidator, ValidationResult
from .value_objects import (
    BetRecordDraft,
    DecodedTicket,
    Money,
    NonNumericInputError,
    RawCode,
    ScanOutcome,
)

__all__ = [
    "BetRecord",
    "BetRecordDraft",
    "BetRecordId",
    "BetRecordRepository",
    "BetType",
    "BuyMethod",
    "DecodeIssueKind",
    "DecodedTicket",
    "Money",
    "NonNumericInputError",
    "RawCode",
    "ScanEventListener",
    "ScanFeedbackNotifier",
    "ScanOutcome",
    "ScanRejectionReason",
    "ScanSession",
    "ScanSessionId",
    "TicketDecoder",
    "TicketValidator",
    "ValidationResult",
    "Venue",
]
