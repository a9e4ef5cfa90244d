from .history_repository import HistoryRepository, MalformedHistoryError

__all__ = ["HistoryRepository", "MalformedHistoryError"]
