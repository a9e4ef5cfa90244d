"""
Main module - Main/Composition Root Layer

Entry point of the application, orchestrating the initialization and
configuration of all other layers:
- Loading settings from the environment
- Wiring dependencies and services (Composition Root)
- Initializing the HTTP framework (FastAPI)
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
