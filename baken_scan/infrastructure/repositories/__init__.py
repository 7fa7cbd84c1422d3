"""リポジトリ実装モジュール."""
from .in_memory_bet_record_repository import InMemoryBetRecordRepository

__all__ = [
    "InMemoryBetRecordRepository",
]
