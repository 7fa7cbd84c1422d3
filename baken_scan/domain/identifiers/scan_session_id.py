"""スキャンセッション識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ScanSessionId:
    """スキャンセッションの一意識別子."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("ScanSessionId cannot be empty")

    @classmethod
    def generate(cls) -> ScanSessionId:
        """新しいScanSessionIdを生成する."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value
