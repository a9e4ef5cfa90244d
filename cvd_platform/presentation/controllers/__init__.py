"""
Controllers Package - Presentation Layer

FastAPI routers mapping HTTP requests onto the prediction session use cases.
"""

from .history_controller import router as history_router
from .predictions_controller import router as predictions_router
from .session_controller import router as session_router
from .system_controller import router as system_router

__all__ = ["history_router", "predictions_router", "session_router", "system_router"]
