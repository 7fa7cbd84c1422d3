"""アプリケーション層モジュール."""
from .use_cases import (
    BetRecordNotFoundError,
    DecodeTicketResult,
    DecodeTicketUseCase,
    DeleteBetRecordUseCase,
    GetBetRecordsUseCase,
    IncompleteBetRecordError,
    SaveBetRecordUseCase,
    ScanTicketUseCase,
)

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
