"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

STAKE_FIELD_WIDTH = 5


@dataclass(frozen=True)
class Money:
    """金額（円）を表現する値オブジェクト."""

    value: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.value < 0:
            raise ValueError("Money value cannot be negative")

    @classmethod
    def of(cls, value: int) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(value)

    @classmethod
    def zero(cls) -> Money:
        """ゼロ円を生成する."""
        return cls(0)

    @classmethod
    def from_stake_field(cls, digits: str) -> Money:
        """QRコードの金額欄（5桁、100円単位）から生成する.

        末尾に "00" を付けてから整数化する（"00001" → 100円、"00100" → 10,000円）。
        """
        if len(digits) != STAKE_FIELD_WIDTH or not digits.isdigit():
            raise ValueError(f"Invalid stake field: {digits!r}")
        return cls(int(digits + "00"))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def format(self) -> str:
        """表示用フォーマット（例: "¥1,000"）."""
        return f"¥{self.value:,}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
