"""収支レコードAPIハンドラーのテスト."""
import json
from datetime import datetime
from unittest.mock import MagicMock

from baken_scan.api.dependencies import Dependencies
from baken_scan.api.handlers.bet_record import (
    bet_record_handler,
    create_bet_record_handler,
    delete_bet_record_handler,
    get_bet_records_handler,
)
from baken_scan.domain.entities import BetRecord
from baken_scan.domain.enums import BetType, Venue
from baken_scan.domain.value_objects import Money
from baken_scan.infrastructure.repositories import InMemoryBetRecordRepository
from ticket_codes import box_code, normal_code, win


def _event(
    body: dict | None = None,
    query_params: dict | None = None,
    path_params: dict | None = None,
) -> dict:
    event: dict = {}
    if body is not None:
        event["body"] = json.dumps(body)
    if query_params is not None:
        event["queryStringParameters"] = query_params
    if path_params is not None:
        event["pathParameters"] = path_params
    return event


def _setup_deps() -> InMemoryBetRecordRepository:
    Dependencies.reset()
    repo = InMemoryBetRecordRepository()
    Dependencies.set_bet_record_repository(repo)
    return repo


def _make_record(purchased_at: datetime, venue: Venue = Venue.TOKYO) -> BetRecord:
    return BetRecord.create(
        purchased_at=purchased_at,
        venue=venue,
        race_number=11,
        bet_type=BetType.WIN,
        investment=Money.of(100),
    )


class TestCreateBetRecordHandler:
    """create_bet_record_handler のテスト."""

    def test_QRコードから作成(self) -> None:
        repo = _setup_deps()
        event = _event(body={
            "raw_code": box_code("9", [1, 2, 3], 6),
            "purchased_at": "2026-05-05T15:30:00",
            "payout": 10000,
        })
        result = create_bet_record_handler(event, None)
        assert result["statusCode"] == 201
        body = json.loads(result["body"])
        assert body["venue"] == "東京"
        assert body["race_number"] == 11
        assert body["bet_type"] == "trifecta"
        assert body["investment"] == 600
        assert body["profit"] == 9400
        assert len(repo.find_all()) == 1

    def test_明示した項目でQRコードの値を上書きする(self) -> None:
        _setup_deps()
        event = _event(body={
            "raw_code": normal_code(win(3, 1)),
            "venue": "中山",
            "race_number": 3,
            "investment": 500,
        })
        result = create_bet_record_handler(event, None)
        assert result["statusCode"] == 201
        body = json.loads(result["body"])
        assert body["venue"] == "中山"
        assert body["race_number"] == 3
        assert body["bet_type"] == "win"
        assert body["investment"] == 500

    def test_QRコードなしで手入力から作成(self) -> None:
        _setup_deps()
        event = _event(body={
            "venue": "小倉",
            "race_number": 1,
            "bet_type": "quinella_place",
            "investment": 300,
        })
        result = create_bet_record_handler(event, None)
        assert result["statusCode"] == 201

    def test_読み取れない項目が残れば400(self) -> None:
        repo = _setup_deps()
        event = _event(body={"raw_code": normal_code(win(3, 1), buy_method="4")})
        result = create_bet_record_handler(event, None)
        assert result["statusCode"] == 400
        assert "bet_type" in json.loads(result["body"])["error"]["message"]
        assert repo.find_all() == []

    def test_数字列でないQRコードは400(self) -> None:
        _setup_deps()
        result = create_bet_record_handler(_event(body={"raw_code": "abc"}), None)
        assert result["statusCode"] == 400

    def test_未知の競馬場は400(self) -> None:
        _setup_deps()
        event = _event(body={"venue": "大井", "race_number": 1, "bet_type": "win", "investment": 100})
        assert create_bet_record_handler(event, None)["statusCode"] == 400

    def test_未知の券種は400(self) -> None:
        _setup_deps()
        event = _event(body={"venue": "東京", "race_number": 1, "bet_type": "wide", "investment": 100})
        assert create_bet_record_handler(event, None)["statusCode"] == 400

    def test_レース番号が整数でなければ400(self) -> None:
        _setup_deps()
        event = _event(body={"venue": "東京", "race_number": "1", "bet_type": "win", "investment": 100})
        assert create_bet_record_handler(event, None)["statusCode"] == 400

    def test_範囲外のレース番号は400(self) -> None:
        _setup_deps()
        event = _event(body={"venue": "東京", "race_number": 13, "bet_type": "win", "investment": 100})
        assert create_bet_record_handler(event, None)["statusCode"] == 400

    def test_負の回収額は400(self) -> None:
        _setup_deps()
        event = _event(body={"raw_code": normal_code(win(3, 1)), "payout": -1})
        assert create_bet_record_handler(event, None)["statusCode"] == 400

    def test_不正な購入日時は400(self) -> None:
        _setup_deps()
        event = _event(body={"raw_code": normal_code(win(3, 1)), "purchased_at": "yesterday"})
        assert create_bet_record_handler(event, None)["statusCode"] == 400


class TestGetBetRecordsHandler:
    """get_bet_records_handler のテスト."""

    def test_全件を新しい順で返す(self) -> None:
        repo = _setup_deps()
        old = _make_record(datetime(2026, 5, 4, 12, 0))
        new = _make_record(datetime(2026, 5, 5, 12, 0))
        repo.save(old)
        repo.save(new)
        result = get_bet_records_handler(_event(), None)
        assert result["statusCode"] == 200
        body = json.loads(result["body"])
        assert [r["record_id"] for r in body] == [new.record_id.value, old.record_id.value]

    def test_期間と競馬場で絞り込む(self) -> None:
        repo = _setup_deps()
        repo.save(_make_record(datetime(2026, 4, 1, 12, 0), Venue.TOKYO))
        target = _make_record(datetime(2026, 5, 5, 12, 0), Venue.KYOTO)
        repo.save(target)
        repo.save(_make_record(datetime(2026, 5, 6, 12, 0), Venue.TOKYO))
        event = _event(query_params={"date_from": "2026-05-01", "date_to": "2026-05-31", "venue": "京都"})
        body = json.loads(get_bet_records_handler(event, None)["body"])
        assert [r["record_id"] for r in body] == [target.record_id.value]

    def test_不正な日付は400(self) -> None:
        _setup_deps()
        result = get_bet_records_handler(_event(query_params={"date_from": "May 1"}), None)
        assert result["statusCode"] == 400


class TestDeleteBetRecordHandler:
    """delete_bet_record_handler のテスト."""

    def test_削除できる(self) -> None:
        repo = _setup_deps()
        record = _make_record(datetime(2026, 5, 5, 12, 0))
        repo.save(record)
        result = delete_bet_record_handler(_event(path_params={"record_id": record.record_id.value}), None)
        assert result["statusCode"] == 200
        assert json.loads(result["body"]) == {"deleted": True}
        assert repo.find_all() == []

    def test_存在しないレコードは404(self) -> None:
        _setup_deps()
        result = delete_bet_record_handler(_event(path_params={"record_id": "missing"}), None)
        assert result["statusCode"] == 404

    def test_record_idがなければ400(self) -> None:
        _setup_deps()
        assert delete_bet_record_handler(_event(), None)["statusCode"] == 400


class TestBetRecordHandlerRouting:
    """bet_record_handler のルーティングテスト."""

    def test_POST(self) -> None:
        _setup_deps()
        event = _event(body={"raw_code": normal_code(win(3, 1))})
        event.update({"resource": "/bet-records", "httpMethod": "POST"})
        assert bet_record_handler(event, None)["statusCode"] == 201

    def test_GET(self) -> None:
        _setup_deps()
        event = {"resource": "/bet-records", "httpMethod": "GET"}
        assert bet_record_handler(event, None)["statusCode"] == 200

    def test_DELETE(self) -> None:
        _setup_deps()
        event = _event(path_params={"record_id": "missing"})
        event.update({"resource": "/bet-records/{record_id}", "httpMethod": "DELETE"})
        assert bet_record_handler(event, None)["statusCode"] == 404

    def test_未知のルートは400(self) -> None:
        _setup_deps()
        event = {"resource": "/bet-records", "httpMethod": "PUT"}
        assert bet_record_handler(event, None)["statusCode"] == 400


class TestBetRecordHandlerExceptionHandling:
    """リポジトリ例外時に500とCORSヘッダーが返る."""

    def _setup_failing_repo(self) -> MagicMock:
        Dependencies.reset()
        repo = MagicMock()
        repo.save.side_effect = RuntimeError("DynamoDB connection error")
        repo.find_all.side_effect = RuntimeError("DynamoDB connection error")
        repo.delete.side_effect = RuntimeError("DynamoDB connection error")
        Dependencies.set_bet_record_repository(repo)
        return repo

    def _assert_500_with_cors(self, response: dict) -> None:
        assert response["statusCode"] == 500
        assert "Access-Control-Allow-Origin" in response["headers"]

    def test_作成時の例外で500(self) -> None:
        self._setup_failing_repo()
        event = _event(body={"raw_code": normal_code(win(3, 1))})
        self._assert_500_with_cors(create_bet_record_handler(event, None))

    def test_取得時の例外で500(self) -> None:
        self._setup_failing_repo()
        self._assert_500_with_cors(get_bet_records_handler(_event(), None))

    def test_削除時の例外で500(self) -> None:
        self._setup_failing_repo()
        event = _event(path_params={"record_id": "rec_001"})
        self._assert_500_with_cors(delete_bet_record_handler(event, None))

    def test_未知の競馬場での絞り込みは400(self) -> None:
        self._setup_failing_repo()
        result = get_bet_records_handler(_event(query_params={"venue": "大井"}), None)
        assert result["statusCode"] == 400
