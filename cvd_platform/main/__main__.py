"""
Main module entry point.

Runs the API server with uvicorn: python -m cvd_platform.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "cvd_platform.main.app:app",
        host=settings.app.host,
        port=settings.app.port,
        reload=settings.app.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
