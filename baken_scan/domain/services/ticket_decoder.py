"""馬券QRコードの解析サービス."""
from __future__ import annotations

from typing import Callable

from ..enums import BuyMethod, DecodeIssueKind
from ..value_objects import (
    DecodedTicket,
    DecodeIssue,
    HeaderFields,
    NonNumericInputError,
    NormalSelection,
    RawCode,
    TicketSelection,
    is_digit_string,
)
from .box_selection_decoder import decode_box_selection
from .formation_selection_decoder import decode_formation_selection
from .header_field_extractor import MIN_HEADER_LENGTH, extract_header_fields
from .nagashi_selection_decoder import decode_nagashi_selection
from .normal_entry_decoder import decode_normal_entries

MIN_SELECTION_LENGTH = 46


def _decode_normal(code: RawCode) -> NormalSelection:
    return NormalSelection(entries=decode_normal_entries(code))


_SELECTION_DECODERS: dict[BuyMethod, Callable[[RawCode], TicketSelection | None]] = {
    BuyMethod.NORMAL: _decode_normal,
    BuyMethod.CHEER: _decode_normal,
    BuyMethod.BOX: decode_box_selection,
    BuyMethod.NAGASHI: decode_nagashi_selection,
    BuyMethod.FORMATION: decode_formation_selection,
}


class TicketDecoder:
    """買い方に応じて買い目の解析を振り分け、解析結果を組み立てる.

    状態を持たないため、複数フレームから同時に呼び出してよい。
    """

    def decode(self, raw: str | RawCode) -> DecodedTicket:
        """QRコードの数字列を解析する.

        数字列でない入力は NonNumericInputError を送出する。それ以外の不備は
        例外にせず、該当項目を欠けたまま issues に記録して返す。
        """
        if not isinstance(raw, RawCode) and not is_digit_string(raw):
            raise NonNumericInputError("QR code must consist of ASCII digits only")
        code = RawCode.of(raw)

        if len(code) < MIN_HEADER_LENGTH:
            return DecodedTicket(
                raw_code=code.value,
                header=HeaderFields.empty(),
                issues=(DecodeIssue(DecodeIssueKind.STRUCTURAL_TRUNCATION, "header"),),
            )

        header, header_issues = extract_header_fields(code)
        issues = list(header_issues)
        selection = None

        buy_method = header.buy_method
        if buy_method is None or not buy_method.is_supported():
            issues.append(DecodeIssue(DecodeIssueKind.UNSUPPORTED_BUY_METHOD, "buy_method"))
        elif len(code) < MIN_SELECTION_LENGTH:
            issues.append(DecodeIssue(DecodeIssueKind.STRUCTURAL_TRUNCATION, "selection"))
        else:
            selection = _SELECTION_DECODERS[buy_method](code)
            if selection is None:
                issues.append(DecodeIssue(DecodeIssueKind.STRUCTURAL_TRUNCATION, "selection"))

        return DecodedTicket(
            raw_code=code.value,
            header=header,
            selection=selection,
            issues=tuple(issues),
        )
