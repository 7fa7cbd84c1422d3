"""解析済み馬券を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..enums import BetType, BuyMethod
from .bet_record_draft import BetRecordDraft
from .box_selection import BoxSelection
from .decode_issue import DecodeIssue
from .formation_selection import FormationSelection
from .header_fields import HeaderFields
from .nagashi_selection import NagashiSelection
from .normal_selection import NormalSelection

TicketSelection = Union[NormalSelection, BoxSelection, NagashiSelection, FormationSelection]

_SELECTION_TYPES: dict[BuyMethod, type] = {
    BuyMethod.NORMAL: NormalSelection,
    BuyMethod.CHEER: NormalSelection,
    BuyMethod.BOX: BoxSelection,
    BuyMethod.NAGASHI: NagashiSelection,
    BuyMethod.FORMATION: FormationSelection,
}


@dataclass(frozen=True)
class DecodedTicket:
    """1枚の馬券QRコードの解析結果.

    ヘッダーと、買い方に対応する買い目のいずれか1つを持つ。
    合計金額は買い目から導出し、個別には保持しない。
    """

    raw_code: str
    header: HeaderFields
    selection: TicketSelection | None = None
    issues: tuple[DecodeIssue, ...] = ()

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.selection is None:
            return
        expected = _SELECTION_TYPES.get(self.buy_method) if self.buy_method is not None else None
        if expected is None or not isinstance(self.selection, expected):
            raise ValueError(
                f"{type(self.selection).__name__} does not match buy method {self.buy_method}"
            )

    @property
    def buy_method(self) -> BuyMethod | None:
        """買い方."""
        return self.header.buy_method

    @property
    def total_investment(self) -> int | None:
        """投資額の合計（円）."""
        if self.selection is None:
            return None
        return self.selection.total_investment.value

    @property
    def bet_type(self) -> BetType | None:
        """代表の券種（通常馬券は一口目）."""
        if self.selection is None:
            return None
        return self.selection.primary_bet_type

    @property
    def ticket_number(self) -> str | None:
        """発券通番."""
        return self.header.ticket_number

    def to_bet_record_draft(self) -> BetRecordDraft:
        """収支レコード入力の初期値を生成する."""
        return BetRecordDraft(
            venue=self.header.venue,
            race_number=self.header.race_number,
            bet_type=self.bet_type,
            investment=self.total_investment,
        )

    def to_dict(self) -> dict:
        """辞書形式に変換する."""
        return {
            "raw_code": self.raw_code,
            "header": self.header.to_dict(),
            "selection": self.selection.to_dict() if self.selection is not None else None,
            "total_investment": self.total_investment,
            "bet_type": self.bet_type.value if self.bet_type else None,
            "issues": [issue.to_dict() for issue in self.issues],
        }
