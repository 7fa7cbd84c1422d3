"""スキャンセッションエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from ..identifiers import ScanSessionId

DEFAULT_DEBOUNCE_WINDOW = timedelta(milliseconds=2000)


@dataclass
class ScanSession:
    """1回のカメラ読み取りセッション.

    最後に採用した時刻（連続読み取り防止）と、採用済みの発券通番（重複防止）を持つ。
    """

    session_id: ScanSessionId
    debounce_window: timedelta = DEFAULT_DEBOUNCE_WINDOW
    _last_accepted_at: datetime | None = None
    _accepted_ticket_numbers: set[str] = field(default_factory=set)

    @classmethod
    def create(cls, debounce_window: timedelta | None = None) -> ScanSession:
        """新しいセッションを作成する."""
        return cls(
            session_id=ScanSessionId.generate(),
            debounce_window=debounce_window if debounce_window is not None else DEFAULT_DEBOUNCE_WINDOW,
            _last_accepted_at=None,
            _accepted_ticket_numbers=set(),
        )

    def is_debounced(self, now: datetime) -> bool:
        """最後の採用から待機時間内か判定."""
        if self._last_accepted_at is None:
            return False
        return now - self._last_accepted_at < self.debounce_window

    def has_accepted(self, ticket_number: str | None) -> bool:
        """採用済みの発券通番か判定."""
        return ticket_number is not None and ticket_number in self._accepted_ticket_numbers

    def record_acceptance(self, ticket_number: str | None, now: datetime) -> None:
        """採用を記録する."""
        if ticket_number is not None:
            self._accepted_ticket_numbers.add(ticket_number)
        self._last_accepted_at = now

    def reset(self) -> None:
        """待機時間をリセットする.

        同じセッション内での二重読み取りを防ぐため、採用済みの発券通番は保持する。
        """
        self._last_accepted_at = None

    @property
    def last_accepted_at(self) -> datetime | None:
        """最後に採用した時刻."""
        return self._last_accepted_at

    def accepted_ticket_numbers(self) -> set[str]:
        """採用済みの発券通番（防御的コピー）."""
        return set(self._accepted_ticket_numbers)
