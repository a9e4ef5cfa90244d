from .history_repository import IHistoryRepository

__all__ = ["IHistoryRepository"]
