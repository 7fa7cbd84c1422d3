"""列挙型のテスト."""
import pytest

from baken_scan.domain.enums import BetType, BuyMethod, ScanRejectionReason, Venue


class TestBetType:
    """BetTypeの単体テスト."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("1", BetType.WIN),
            ("2", BetType.PLACE),
            ("3", BetType.BRACKET_QUINELLA),
            ("5", BetType.QUINELLA),
            ("6", BetType.EXACTA),
            ("7", BetType.QUINELLA_PLACE),
            ("8", BetType.TRIO),
            ("9", BetType.TRIFECTA),
        ],
    )
    def test_式別コードから変換できる(self, code, expected) -> None:
        assert BetType.from_code(code) == expected

    @pytest.mark.parametrize("code", ["0", "4", None])
    def test_未使用のコードはNone(self, code) -> None:
        assert BetType.from_code(code) is None

    def test_表示名(self) -> None:
        assert BetType.WIN.get_display_name() == "単勝"
        assert BetType.QUINELLA_PLACE.get_display_name() == "ワイド"
        assert BetType.TRIFECTA.get_display_name() == "3連単"

    def test_必要頭数(self) -> None:
        assert BetType.PLACE.get_required_count() == 1
        assert BetType.EXACTA.get_required_count() == 2
        assert BetType.TRIO.get_required_count() == 3

    def test_着順指定が必要な券種(self) -> None:
        assert BetType.EXACTA.is_order_required()
        assert BetType.TRIFECTA.is_order_required()
        assert not BetType.QUINELLA.is_order_required()

    def test_3頭を選ぶ券種(self) -> None:
        assert BetType.TRIO.is_triple()
        assert BetType.TRIFECTA.is_triple()
        assert not BetType.BRACKET_QUINELLA.is_triple()


class TestBuyMethod:
    """BuyMethodの単体テスト."""

    def test_1桁の数字から変換できる(self) -> None:
        assert BuyMethod.from_digit("0") == BuyMethod.NORMAL
        assert BuyMethod.from_digit("3") == BuyMethod.FORMATION
        assert BuyMethod.from_digit("5") == BuyMethod.CHEER

    @pytest.mark.parametrize("digit", ["6", "9", "", None])
    def test_該当しない数字はNone(self, digit) -> None:
        assert BuyMethod.from_digit(digit) is None

    def test_クイックピックは非対応(self) -> None:
        assert not BuyMethod.QUICK_PICK.is_supported()
        assert all(m.is_supported() for m in BuyMethod if m != BuyMethod.QUICK_PICK)

    def test_口ごとに記録される買い方(self) -> None:
        assert BuyMethod.NORMAL.uses_entry_list()
        assert BuyMethod.CHEER.uses_entry_list()
        assert not BuyMethod.BOX.uses_entry_list()

    def test_表示名(self) -> None:
        assert BuyMethod.NAGASHI.get_display_name() == "ながし"


class TestVenue:
    """Venueの単体テスト."""

    def test_競馬場コードから変換できる(self) -> None:
        assert Venue.from_code("01") == Venue.SAPPORO
        assert Venue.from_code("10") == Venue.KOKURA

    @pytest.mark.parametrize("code", ["00", "11", "99", None])
    def test_範囲外のコードはNone(self, code) -> None:
        assert Venue.from_code(code) is None

    def test_表示名から変換できる(self) -> None:
        assert Venue.from_display_name("東京") == Venue.TOKYO

    def test_未知の表示名はエラー(self) -> None:
        with pytest.raises(ValueError, match="Unknown venue"):
            Venue.from_display_name("大井")


class TestScanRejectionReason:
    """ScanRejectionReasonの単体テスト."""

    def test_不正な馬券だけが通知対象(self) -> None:
        assert not ScanRejectionReason.INVALID_TICKET.is_silent()
        assert ScanRejectionReason.DEBOUNCED.is_silent()
        assert ScanRejectionReason.DUPLICATE_TICKET.is_silent()
        assert ScanRejectionReason.NON_NUMERIC.is_silent()
        assert ScanRejectionReason.TOO_SHORT.is_silent()
