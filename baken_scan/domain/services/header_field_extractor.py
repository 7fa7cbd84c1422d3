"""QRコードの共通ヘッダー項目の抽出.

買い方によらない固定位置の項目（0始まりの位置）:
    [1:3]   競馬場コード
    [6:8]   年（下2桁）
    [8:10]  回
    [10:12] 日
    [12:14] レース番号
    [14]    買い方
    [16:22] 発券通番（重複チェック用）
    [28:32] 発売場所
    [34:43] 発売機の機番（9桁）

範囲外・桁不足の項目だけが None になり、他の項目の抽出には影響しない。
"""
from __future__ import annotations

from typing import Any, Callable

from ..enums import BuyMethod, DecodeIssueKind, Venue
from ..value_objects import DecodeIssue, HeaderFields, RawCode
from .sales_location import resolve_sales_location

MIN_HEADER_LENGTH = 42
TICKET_NUMBER_SLICE = (16, 22)


def _int_in_range(low: int, high: int) -> Callable[[str], int | None]:
    def convert(digits: str) -> int | None:
        value = int(digits)
        return value if low <= value <= high else None

    return convert


_HEADER_FIELDS: dict[str, tuple[int, int, Callable[[str], Any]]] = {
    "venue": (1, 3, Venue.from_code),
    "year": (6, 8, _int_in_range(0, 99)),
    "round": (8, 10, _int_in_range(1, 12)),
    "day": (10, 12, _int_in_range(1, 31)),
    "race_number": (12, 14, _int_in_range(1, 12)),
    "buy_method": (14, 15, BuyMethod.from_digit),
    "ticket_number": (*TICKET_NUMBER_SLICE, str),
    "sales_location": (28, 32, resolve_sales_location),
    "machine_code": (34, 43, str),
}


def _read_field(code: RawCode, name: str) -> tuple[Any, DecodeIssue | None]:
    start, end, convert = _HEADER_FIELDS[name]
    digits = code.slice(start, end)
    if digits is None:
        return None, DecodeIssue(DecodeIssueKind.STRUCTURAL_TRUNCATION, name)
    value = convert(digits)
    if value is None:
        return None, DecodeIssue(DecodeIssueKind.FIELD_OUT_OF_RANGE, name)
    return value, None


def _extract(code: RawCode | str, name: str) -> Any:
    value, _ = _read_field(RawCode.of(code), name)
    return value


def extract_venue(code: RawCode | str) -> Venue | None:
    """競馬場を抽出する."""
    return _extract(code, "venue")


def extract_race_number(code: RawCode | str) -> int | None:
    """レース番号（1〜12）を抽出する."""
    return _extract(code, "race_number")


def extract_year(code: RawCode | str) -> int | None:
    """年（下2桁、例: 12なら2012年）を抽出する."""
    return _extract(code, "year")


def extract_round(code: RawCode | str) -> int | None:
    """開催回（1〜12）を抽出する."""
    return _extract(code, "round")


def extract_day(code: RawCode | str) -> int | None:
    """開催日（1〜31）を抽出する."""
    return _extract(code, "day")


def extract_buy_method(code: RawCode | str) -> BuyMethod | None:
    """買い方を抽出する."""
    return _extract(code, "buy_method")


def extract_ticket_number(code: RawCode | str) -> str | None:
    """発券通番を抽出する.

    先頭の0を失わないよう数値化せず文字列のまま扱う。
    """
    return _extract(code, "ticket_number")


def extract_sales_location(code: RawCode | str) -> str | None:
    """発売場所の名称を抽出する（未登録のコードはコードのまま）."""
    return _extract(code, "sales_location")


def extract_machine_code(code: RawCode | str) -> str | None:
    """発売機の機番コード（9桁）を抽出する."""
    return _extract(code, "machine_code")


def extract_header_fields(code: RawCode | str) -> tuple[HeaderFields, tuple[DecodeIssue, ...]]:
    """全ヘッダー項目を抽出し、抽出できなかった項目の問題と共に返す."""
    raw = RawCode.of(code)
    values: dict[str, Any] = {}
    issues: list[DecodeIssue] = []
    for name in _HEADER_FIELDS:
        value, issue = _read_field(raw, name)
        values[name] = value
        if issue is not None:
            issues.append(issue)
    return HeaderFields(**values), tuple(issues)
