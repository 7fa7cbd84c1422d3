"""DynamoDB 収支レコードリポジトリ実装."""
import os
from datetime import date, datetime
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr

from baken_scan.domain.entities import BetRecord
from baken_scan.domain.enums import BetType, Venue
from baken_scan.domain.identifiers import BetRecordId
from baken_scan.domain.ports import BetRecordRepository
from baken_scan.domain.value_objects import Money


class DynamoDBBetRecordRepository(BetRecordRepository):
    """DynamoDB 収支レコードリポジトリ."""

    def __init__(self) -> None:
        """初期化."""
        self._table_name = os.environ.get("BET_RECORD_TABLE_NAME", "baken-scan-bet-record")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, record: BetRecord) -> None:
        """収支レコードを保存する."""
        self._table.put_item(Item=self._to_dynamodb_item(record))

    def find_by_id(self, record_id: BetRecordId) -> BetRecord | None:
        """IDで検索する."""
        response = self._table.get_item(Key={"record_id": record_id.value})
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_all(self) -> list[BetRecord]:
        """全件を購入日時の新しい順で取得する."""
        return self._scan()

    def find_by_date_range(self, from_date: date, to_date: date) -> list[BetRecord]:
        """購入日の範囲で検索する（両端を含む）."""
        return self._scan(
            Attr("purchase_date").between(from_date.isoformat(), to_date.isoformat())
        )

    def find_by_venue(self, venue: Venue) -> list[BetRecord]:
        """競馬場で検索する."""
        return self._scan(Attr("venue").eq(venue.value))

    def delete(self, record_id: BetRecordId) -> bool:
        """削除する."""
        response = self._table.delete_item(
            Key={"record_id": record_id.value},
            ReturnValues="ALL_OLD",
        )
        return "Attributes" in response

    def _scan(self, filter_expression=None) -> list[BetRecord]:
        """テーブルを全ページ走査する."""
        scan_kwargs = {}
        if filter_expression is not None:
            scan_kwargs["FilterExpression"] = filter_expression

        resp = self._table.scan(**scan_kwargs)
        items = resp.get("Items", [])
        while resp.get("LastEvaluatedKey"):
            resp = self._table.scan(ExclusiveStartKey=resp["LastEvaluatedKey"], **scan_kwargs)
            items.extend(resp.get("Items", []))

        records = [self._from_dynamodb_item(item) for item in items]
        return sorted(records, key=lambda r: r.purchased_at, reverse=True)

    @staticmethod
    def _to_dynamodb_item(record: BetRecord) -> dict:
        """BetRecord を DynamoDB アイテムに変換する."""
        return {
            "record_id": record.record_id.value,
            "purchased_at": record.purchased_at.isoformat(),
            "purchase_date": record.purchased_at.date().isoformat(),
            "venue": record.venue.value,
            "race_number": Decimal(str(record.race_number)),
            "bet_type": record.bet_type.value,
            "investment": Decimal(str(record.investment.value)),
            "payout": Decimal(str(record.payout.value)),
        }

    @staticmethod
    def _from_dynamodb_item(item: dict) -> BetRecord:
        """DynamoDB アイテムから BetRecord を復元する."""
        return BetRecord(
            record_id=BetRecordId(item["record_id"]),
            purchased_at=datetime.fromisoformat(item["purchased_at"]),
            venue=Venue(item["venue"]),
            race_number=int(item["race_number"]),
            bet_type=BetType(item["bet_type"]),
            investment=Money.of(int(item["investment"])),
            payout=Money.of(int(item.get("payout", 0))),
        )
