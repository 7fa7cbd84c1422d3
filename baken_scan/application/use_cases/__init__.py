"""ユースケースモジュール."""
from .decode_ticket import DecodeTicketResult, DecodeTicketUseCase
from .delete_bet_record import BetRecordNotFoundError, DeleteBetRecordUseCase
from .get_bet_records import GetBetRecordsUseCase
from .save_bet_record import IncompleteBetRecordError, SaveBetRecordUseCase
from .scan_ticket import ScanTicketUseCase

__all__ = [
    "BetRecordNotFoundError",
    "DecodeTicketResult",
    "DecodeTicketUseCase",
    "DeleteBetRecordUseCase",
    "GetBetRecordsUseCase",
    "IncompleteBetRecordError",
    "SaveBetRecordUseCase",
    "ScanTicketUseCase",
]
