"""QRコード解析時の問題種別の列挙型."""
from enum import Enum


class DecodeIssueKind(Enum):
    """解析時に記録される問題の種別."""

    FIELD_OUT_OF_RANGE = "field_out_of_range"
    STRUCTURAL_TRUNCATION = "structural_truncation"
    UNSUPPORTED_BUY_METHOD = "unsupported_buy_method"
