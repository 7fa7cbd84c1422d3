"""解析済み馬券の有効性検証サービス."""
from dataclasses import dataclass

from ..value_objects import DecodedTicket


@dataclass(frozen=True)
class ValidationResult:
    """検証結果."""

    is_valid: bool
    errors: tuple[str, ...]

    @classmethod
    def success(cls) -> "ValidationResult":
        """成功結果を生成する."""
        return cls(is_valid=True, errors=())

    @classmethod
    def failure(cls, errors: list[str]) -> "ValidationResult":
        """失敗結果を生成する."""
        return cls(is_valid=False, errors=tuple(errors))


class TicketValidator:
    """解析結果が記録に使えるだけの項目を備えているか検証する."""

    def validate(self, ticket: DecodedTicket) -> ValidationResult:
        """必須項目が揃っているかを検証する."""
        errors: list[str] = []

        if ticket.header.venue is None:
            errors.append("競馬場を読み取れませんでした")
        if ticket.header.race_number is None:
            errors.append("レース番号を読み取れませんでした")

        buy_method = ticket.buy_method
        if buy_method is None or not buy_method.is_supported():
            errors.append("対応していない買い方です")
        else:
            selection = ticket.selection
            if selection is None:
                errors.append(f"{buy_method.get_display_name()}の買い目を読み取れませんでした")
            elif buy_method.uses_entry_list() and selection.is_empty():
                errors.append("買い目が1口も読み取れませんでした")
            if ticket.total_investment is None:
                errors.append("投資額を読み取れませんでした")

        if errors:
            return ValidationResult.failure(errors)
        return ValidationResult.success()

    def is_valid(self, ticket: DecodedTicket) -> bool:
        """有効な解析結果か判定."""
        return self.validate(ticket).is_valid
