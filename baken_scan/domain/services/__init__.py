"""ドメインサービスモジュール."""
from .box_selection_decoder import decode_box_selection
from .formation_selection_decoder import count_formation_patterns, decode_formation_selection
from .header_field_extractor import (
    MIN_HEADER_LENGTH,
    extract_buy_method,
    extract_day,
    extract_header_fields,
    extract_machine_code,
    extract_race_number,
    extract_round,
    extract_sales_location,
    extract_ticket_number,
    extract_venue,
    extract_year,
)
from .nagashi_selection_decoder import decode_nagashi_selection
from .normal_entry_decoder import decode_normal_entries
from .sales_location import resolve_sales_location
from .ticket_decoder import MIN_SELECTION_LENGTH, TicketDecoder
from .ticket_validator import TicketValidator, ValidationResult

__all__ = [
    "MIN_HEADER_LENGTH",
    "MIN_SELECTION_LENGTH",
    "TicketDecoder",
    "TicketValidator",
    "ValidationResult",
    "count_formation_patterns",
    "decode_box_selection",
    "decode_formation_selection",
    "decode_nagashi_selection",
    "decode_normal_entries",
    "extract_buy_method",
    "extract_day",
    "extract_header_fields",
    "extract_machine_code",
    "extract_race_number",
    "extract_round",
    "extract_sales_location",
    "extract_ticket_number",
    "extract_venue",
    "extract_year",
    "resolve_sales_location",
]
