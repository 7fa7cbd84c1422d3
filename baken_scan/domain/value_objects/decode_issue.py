"""解析時の問題を表現する値オブジェクト."""
from dataclasses import dataclass

from ..enums import DecodeIssueKind


@dataclass(frozen=True)
class DecodeIssue:
    """解析できなかった項目とその理由."""

    kind: DecodeIssueKind
    field: str

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {"kind": self.kind.value, "field": self.field}
