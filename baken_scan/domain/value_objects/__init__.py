"""値オブジェクトモジュール."""
from .bet_record_draft import BetRecordDraft
from .box_selection import BoxSelection
from .decode_issue import DecodeIssue
from .decoded_ticket import DecodedTicket, TicketSelection
from .formation_selection import FormationSelection
from .header_fields import HeaderFields
from .money import Money
from .nagashi_selection import NagashiSelection
from .normal_selection import NormalEntry, NormalSelection
from .raw_code import NonNumericInputError, RawCode, is_digit_string
from .scan_outcome import INVALID_TICKET_MESSAGE, ScanOutcome

__all__ = [
    "BetRecordDraft",
    "BoxSelection",
    "DecodeIssue",
    "DecodedTicket",
    "FormationSelection",
    "HeaderFields",
    "INVALID_TICKET_MESSAGE",
    "Money",
    "NagashiSelection",
    "NonNumericInputError",
    "NormalEntry",
    "NormalSelection",
    "RawCode",
    "ScanOutcome",
    "TicketSelection",
    "is_digit_string",
]
