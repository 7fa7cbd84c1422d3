"""馬券QRコードAPIハンドラー."""
import logging
from typing import Any

from baken_scan.api.dependencies import Dependencies
from baken_scan.api.request import get_body, get_optional_str
from baken_scan.api.response import bad_request_response, success_response
from baken_scan.application.use_cases import DecodeTicketUseCase
from baken_scan.domain.value_objects import NonNumericInputError

logger = logging.getLogger(__name__)


def ticket_handler(event: dict, context: Any) -> dict:
    """馬券QRコードAPIルーティングハンドラー."""
    resource = event.get("resource", "")
    method = event.get("httpMethod", "")

    if resource == "/tickets/decode" and method == "POST":
        return decode_ticket_handler(event, context)

    return bad_request_response("Unknown route", event=event)


def decode_ticket_handler(event: dict, context: Any) -> dict:
    """QRコードの数字列を解析する.

    POST /tickets/decode

    解析できなかった馬券も is_valid=false として部分的な内容を返す。
    """
    try:
        raw_code = get_optional_str(get_body(event), "raw_code")
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    if raw_code is None:
        return bad_request_response("raw_code is required", event=event)

    use_case = DecodeTicketUseCase(
        decoder=Dependencies.get_ticket_decoder(),
        validator=Dependencies.get_ticket_validator(),
    )
    try:
        result = use_case.execute(raw_code)
    except NonNumericInputError as e:
        return bad_request_response(str(e), event=event)

    if not result.validation.is_valid:
        logger.info("Decoded invalid ticket: %s", "; ".join(result.validation.errors))

    return success_response({
        "ticket": result.ticket.to_dict(),
        "is_valid": result.validation.is_valid,
        "errors": list(result.validation.errors),
        "draft": result.draft.to_dict(),
    }, event=event)
