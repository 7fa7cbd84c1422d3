"""TicketDecoderのテスト."""
import pytest

from baken_scan.domain.enums import BetType, BuyMethod, DecodeIssueKind, Venue
from baken_scan.domain.services import TicketDecoder
from baken_scan.domain.value_objects import (
    BoxSelection,
    DecodeIssue,
    FormationSelection,
    HeaderFields,
    NagashiSelection,
    NonNumericInputError,
    NormalSelection,
    RawCode,
)
from ticket_codes import (
    box_code,
    formation_code,
    header,
    nagashi_paired_code,
    nagashi_triple_code,
    normal_code,
    pair,
    triple,
    win,
)


class TestTicketDecoder:
    """TicketDecoderの単体テスト."""

    def setup_method(self) -> None:
        self.decoder = TicketDecoder()

    def test_通常馬券(self) -> None:
        code = normal_code(win(3, 1), pair("5", 3, 7, 5), triple("9", 1, 2, 3, 2))
        ticket = self.decoder.decode(code)
        assert ticket.raw_code == code
        assert ticket.header.venue == Venue.TOKYO
        assert ticket.buy_method == BuyMethod.NORMAL
        assert isinstance(ticket.selection, NormalSelection)
        assert ticket.total_investment == 800
        assert ticket.bet_type == BetType.WIN
        assert ticket.issues == ()

    def test_応援馬券(self) -> None:
        ticket = self.decoder.decode(normal_code(win(5, 10), win(5, 10, bet_code="2"), buy_method="5"))
        assert ticket.buy_method == BuyMethod.CHEER
        assert ticket.total_investment == 2000

    def test_ボックス(self) -> None:
        ticket = self.decoder.decode(box_code("5", [7, 12], 3))
        assert isinstance(ticket.selection, BoxSelection)
        assert ticket.total_investment == 300
        assert ticket.bet_type == BetType.QUINELLA

    def test_ながし(self) -> None:
        ticket = self.decoder.decode(nagashi_triple_code("8", 7, {1}, {2, 3, 4, 5}, {2, 3, 4, 5}, 1))
        assert isinstance(ticket.selection, NagashiSelection)
        assert ticket.total_investment == 600

    def test_馬連ながし(self) -> None:
        ticket = self.decoder.decode(nagashi_paired_code("5", 2, 3, {1, 5, 7}, 2))
        assert ticket.total_investment == 600

    def test_フォーメーション(self) -> None:
        ticket = self.decoder.decode(formation_code("9", {1, 2}, {1, 2, 3}, {1, 2, 3, 4}, 1))
        assert isinstance(ticket.selection, FormationSelection)
        assert ticket.total_investment == 800

    def test_RawCodeも受け付ける(self) -> None:
        code = normal_code(win(3, 1))
        assert self.decoder.decode(RawCode(code)) == self.decoder.decode(code)

    def test_同じ入力には同じ結果を返す(self) -> None:
        code = box_code("9", [1, 2, 3], 6)
        assert self.decoder.decode(code) == self.decoder.decode(code)

    @pytest.mark.parametrize("raw", ["", "0123abc", "12 34", "https://example.com"])
    def test_数字列でない入力はエラー(self, raw) -> None:
        with pytest.raises(NonNumericInputError):
            self.decoder.decode(raw)

    def test_ヘッダーに満たないコードは空のヘッダー(self) -> None:
        ticket = self.decoder.decode(header()[:41])
        assert ticket.header == HeaderFields.empty()
        assert ticket.selection is None
        assert ticket.issues == (DecodeIssue(DecodeIssueKind.STRUCTURAL_TRUNCATION, "header"),)

    def test_クイックピックは買い目を解析しない(self) -> None:
        ticket = self.decoder.decode(normal_code(win(3, 1), buy_method="4"))
        assert ticket.buy_method == BuyMethod.QUICK_PICK
        assert ticket.header.venue == Venue.TOKYO
        assert ticket.selection is None
        assert DecodeIssue(DecodeIssueKind.UNSUPPORTED_BUY_METHOD, "buy_method") in ticket.issues

    def test_未定義の買い方(self) -> None:
        ticket = self.decoder.decode(normal_code(win(3, 1), buy_method="8"))
        assert ticket.buy_method is None
        assert ticket.selection is None
        assert DecodeIssue(DecodeIssueKind.FIELD_OUT_OF_RANGE, "buy_method") in ticket.issues
        assert DecodeIssue(DecodeIssueKind.UNSUPPORTED_BUY_METHOD, "buy_method") in ticket.issues

    def test_買い目に満たないコードは切り詰めとして記録される(self) -> None:
        ticket = self.decoder.decode(header() + "103")
        assert ticket.header.race_number == 11
        assert ticket.selection is None
        assert ticket.issues == (DecodeIssue(DecodeIssueKind.STRUCTURAL_TRUNCATION, "selection"),)

    def test_買い目を読み取れない場合も切り詰めとして記録される(self) -> None:
        ticket = self.decoder.decode(box_code("5", [], 1))
        assert ticket.selection is None
        assert DecodeIssue(DecodeIssueKind.STRUCTURAL_TRUNCATION, "selection") in ticket.issues

    def test_通常馬券の口がなくても買い目は空で返す(self) -> None:
        ticket = self.decoder.decode(header() + win(3, 1))
        assert isinstance(ticket.selection, NormalSelection)
        assert ticket.selection.is_empty()
        assert ticket.total_investment == 0

    def test_範囲外の項目があっても他の項目は解析する(self) -> None:
        ticket = self.decoder.decode(normal_code(win(3, 1), venue="00"))
        assert ticket.header.venue is None
        assert ticket.total_investment == 100
        assert ticket.issues == (DecodeIssue(DecodeIssueKind.FIELD_OUT_OF_RANGE, "venue"),)
