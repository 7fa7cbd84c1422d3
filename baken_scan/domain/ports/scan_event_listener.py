"""スキャン結果の受け取りインターフェース."""
from abc import ABC, abstractmethod

from ..value_objects import ScanOutcome


class ScanEventListener(ABC):
    """採用・解析エラーの結果を受け取る画面側のインターフェース."""

    @abstractmethod
    def on_scan_outcome(self, outcome: ScanOutcome) -> None:
        """スキャン結果を受け取る."""
        pass
