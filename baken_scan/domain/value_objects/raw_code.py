"""QRコードの生データを表現する値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass

_DIGITS_PATTERN = re.compile(r"[0-9]+")


class NonNumericInputError(ValueError):
    """QRコードが数字列でないエラー."""

    pass


def is_digit_string(text: str | None) -> bool:
    """ASCII数字のみからなる空でない文字列か判定する."""
    return bool(text) and _DIGITS_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True)
class RawCode:
    """馬券QRコードから読み取った数字列.

    構造は仮定せず、位置指定で切り出すだけの不変な値として扱う。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not is_digit_string(self.value):
            raise NonNumericInputError("QR code must consist of ASCII digits only")

    @classmethod
    def of(cls, value: str | RawCode) -> RawCode:
        """文字列またはRawCodeからRawCodeを生成する."""
        if isinstance(value, RawCode):
            return value
        return cls(value)

    def slice(self, start: int, end: int) -> str | None:
        """[start, end) を切り出す（長さが足りない場合はNone）."""
        if len(self.value) < end:
            return None
        return self.value[start:end]

    def char_at(self, index: int) -> str | None:
        """指定位置の1桁を取得する（範囲外はNone）."""
        if index >= len(self.value):
            return None
        return self.value[index]

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
