"""Lambdaハンドラーモジュール."""
from .bet_record import (
    bet_record_handler,
    create_bet_record_handler,
    delete_bet_record_handler,
    get_bet_records_handler,
)
from .ticket import decode_ticket_handler, ticket_handler

__all__ = [
    # Tickets
    "ticket_handler",
    "decode_ticket_handler",
    # Bet records
    "bet_record_handler",
    "create_bet_record_handler",
    "get_bet_records_handler",
    "delete_bet_record_handler",
]
