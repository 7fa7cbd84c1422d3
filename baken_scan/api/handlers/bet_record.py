"""収支レコードAPIハンドラー."""
import logging
from datetime import datetime
from typing import Any

from baken_scan.api.dependencies import Dependencies
from baken_scan.api.request import (
    get_body,
    get_optional_int,
    get_optional_str,
    get_path_parameter,
    get_query_parameter,
)
from baken_scan.api.response import (
    bad_request_response,
    internal_error_response,
    not_found_response,
    success_response,
)
from baken_scan.application.use_cases import (
    BetRecordNotFoundError,
    DeleteBetRecordUseCase,
    GetBetRecordsUseCase,
    IncompleteBetRecordError,
    SaveBetRecordUseCase,
)
from baken_scan.domain.enums import BetType, Venue
from baken_scan.domain.value_objects import BetRecordDraft

logger = logging.getLogger(__name__)


def bet_record_handler(event: dict, context: Any) -> dict:
    """収支レコードAPIルーティングハンドラー."""
    resource = event.get("resource", "")
    method = event.get("httpMethod", "")

    if resource == "/bet-records" and method == "POST":
        return create_bet_record_handler(event, context)
    if resource == "/bet-records" and method == "GET":
        return get_bet_records_handler(event, context)
    if resource == "/bet-records/{record_id}" and method == "DELETE":
        return delete_bet_record_handler(event, context)

    return bad_request_response("Unknown route", event=event)


def _build_draft(body: dict) -> BetRecordDraft:
    """QRコードの解析結果を初期値とし、明示された項目で上書きする."""
    draft = BetRecordDraft()
    raw_code = get_optional_str(body, "raw_code")
    if raw_code is not None:
        draft = Dependencies.get_ticket_decoder().decode(raw_code).to_bet_record_draft()

    venue = get_optional_str(body, "venue")
    bet_type = get_optional_str(body, "bet_type")
    return draft.with_overrides(
        venue=Venue.from_display_name(venue) if venue else None,
        race_number=get_optional_int(body, "race_number"),
        bet_type=BetType(bet_type) if bet_type else None,
        investment=get_optional_int(body, "investment"),
    )


def create_bet_record_handler(event: dict, context: Any) -> dict:
    """収支レコードを作成する.

    POST /bet-records
    """
    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    try:
        draft = _build_draft(body)
        payout = get_optional_int(body, "payout") or 0
        purchased_at_text = get_optional_str(body, "purchased_at")
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    if payout < 0:
        return bad_request_response("payout must be a non-negative integer", event=event)

    purchased_at = None
    if purchased_at_text is not None:
        try:
            purchased_at = datetime.fromisoformat(purchased_at_text)
        except ValueError:
            return bad_request_response("purchased_at must be an ISO 8601 datetime", event=event)

    use_case = SaveBetRecordUseCase(
        bet_record_repository=Dependencies.get_bet_record_repository(),
    )
    try:
        record = use_case.execute(draft, purchased_at=purchased_at, payout=payout)
    except (IncompleteBetRecordError, ValueError) as e:
        return bad_request_response(str(e), event=event)
    except Exception:
        logger.exception("Failed to save bet record")
        return internal_error_response(event=event)

    return success_response(record.to_dict(), status_code=201, event=event)


def get_bet_records_handler(event: dict, context: Any) -> dict:
    """収支レコード一覧を取得する.

    GET /bet-records
    """
    use_case = GetBetRecordsUseCase(
        bet_record_repository=Dependencies.get_bet_record_repository(),
    )
    try:
        records = use_case.execute(
            date_from=get_query_parameter(event, "date_from"),
            date_to=get_query_parameter(event, "date_to"),
            venue=get_query_parameter(event, "venue"),
        )
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    except Exception:
        logger.exception("Failed to get bet records")
        return internal_error_response(event=event)

    return success_response([r.to_dict() for r in records], event=event)


def delete_bet_record_handler(event: dict, context: Any) -> dict:
    """収支レコードを削除する.

    DELETE /bet-records/{record_id}
    """
    record_id = get_path_parameter(event, "record_id")
    if not record_id:
        return bad_request_response("record_id is required", event=event)

    use_case = DeleteBetRecordUseCase(
        bet_record_repository=Dependencies.get_bet_record_repository(),
    )
    try:
        use_case.execute(record_id)
    except BetRecordNotFoundError:
        return not_found_response("Bet record", event=event)
    except Exception:
        logger.exception("Failed to delete bet record %s", record_id)
        return internal_error_response(event=event)

    return success_response({"deleted": True}, event=event)
