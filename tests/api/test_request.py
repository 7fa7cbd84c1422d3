"""API リクエストユーティリティのテスト."""
import json

import pytest

from baken_scan.api.request import (
    get_body,
    get_optional_int,
    get_optional_str,
    get_path_parameter,
    get_query_parameter,
)


class TestGetParameters:
    """パス・クエリパラメータのテスト."""

    def test_パスパラメータはURLデコードされる(self) -> None:
        event = {"pathParameters": {"record_id": "rec%20001"}}
        assert get_path_parameter(event, "record_id") == "rec 001"

    def test_パスパラメータがなければNone(self) -> None:
        assert get_path_parameter({"pathParameters": None}, "record_id") is None

    def test_クエリパラメータ(self) -> None:
        event = {"queryStringParameters": {"venue": "東京"}}
        assert get_query_parameter(event, "venue") == "東京"
        assert get_query_parameter(event, "date_from", "2026-01-01") == "2026-01-01"


class TestGetBody:
    """get_bodyのテスト."""

    def test_JSONオブジェクトを返す(self) -> None:
        assert get_body({"body": json.dumps({"raw_code": "123"})}) == {"raw_code": "123"}

    def test_ボディがなければ空辞書(self) -> None:
        assert get_body({}) == {}

    def test_JSONでなければエラー(self) -> None:
        with pytest.raises(ValueError, match="Invalid JSON body"):
            get_body({"body": "{"})

    def test_オブジェクトでなければエラー(self) -> None:
        with pytest.raises(ValueError, match="must be a JSON object"):
            get_body({"body": "[1, 2]"})


class TestBodyFields:
    """ボディ項目の取得テスト."""

    def test_文字列項目(self) -> None:
        assert get_optional_str({"venue": "東京"}, "venue") == "東京"
        assert get_optional_str({"venue": ""}, "venue") is None
        assert get_optional_str({}, "venue") is None

    def test_文字列でなければエラー(self) -> None:
        with pytest.raises(ValueError, match="raw_code must be a string"):
            get_optional_str({"raw_code": 123}, "raw_code")

    def test_整数項目(self) -> None:
        assert get_optional_int({"race_number": 11}, "race_number") == 11
        assert get_optional_int({}, "race_number") is None

    @pytest.mark.parametrize("value", ["11", 1.5, True])
    def test_整数でなければエラー(self, value) -> None:
        with pytest.raises(ValueError, match="race_number must be an integer"):
            get_optional_int({"race_number": value}, "race_number")
