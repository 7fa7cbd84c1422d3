"""列挙型モジュール."""
from .bet_type import BetType
from .buy_method import BuyMethod
from .decode_issue_kind import DecodeIssueKind
from .scan_rejection_reason import ScanRejectionReason
from .venue import Venue

__all__ = [
    "BetType",
    "BuyMethod",
    "DecodeIssueKind",
    "ScanRejectionReason",
    "Venue",
]
