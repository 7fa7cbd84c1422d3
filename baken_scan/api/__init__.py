"""API層モジュール."""
from .dependencies import Dependencies
from .handlers import (
    bet_record_handler,
    create_bet_record_handler,
    decode_ticket_handler,
    delete_bet_record_handler,
    get_bet_records_handler,
    ticket_handler,
)
from .request import (
    get_body,
    get_optional_int,
    get_optional_str,
    get_path_parameter,
    get_query_parameter,
)
from .response import (
    bad_request_response,
    error_response,
    internal_error_response,
    not_found_response,
    success_response,
)

__all__ = [
    "Dependencies",
    "bad_request_response",
    "bet_record_handler",
    "create_bet_record_handler",
    "decode_ticket_handler",
    "delete_bet_record_handler",
    "error_response",
    "get_bet_records_handler",
    "get_body",
    "get_optional_int",
    "get_optional_str",
    "get_path_parameter",
    "get_query_parameter",
    "internal_error_response",
    "not_found_response",
    "success_response",
    "ticket_handler",
]
