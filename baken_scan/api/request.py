"""API リクエストユーティリティ."""
import json
from typing import Any
from urllib.parse import unquote


def get_path_parameter(event: dict, name: str) -> str | None:
    """パスパラメータを取得する（URLデコード済み）."""
    path_params = event.get("pathParameters") or {}
    value = path_params.get(name)
    if value is None:
        return None
    return unquote(value)


def get_query_parameter(event: dict, name: str, default: str | None = None) -> str | None:
    """クエリパラメータを取得する."""
    query_params = event.get("queryStringParameters") or {}
    return query_params.get(name, default)


def get_body(event: dict) -> dict[str, Any]:
    """リクエストボディをJSONオブジェクトとして取得する.

    Args:
        event: Lambda イベント

    Returns:
        パースされたボディ（空の場合は空辞書）

    Raises:
        ValueError: JSONとして読めない場合、またはオブジェクトでない場合
    """
    body = event.get("body")
    if not body:
        return {}
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON body: {e}")
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object")
    return parsed


def get_optional_str(body: dict[str, Any], name: str) -> str | None:
    """ボディの文字列項目を取得する（未指定・空文字はNone）."""
    value = body.get(name)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value


def get_optional_int(body: dict[str, Any], name: str) -> int | None:
    """ボディの整数項目を取得する（未指定はNone）.

    JSON の true/false は整数として扱わない。
    """
    value = body.get(name)
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    return value
