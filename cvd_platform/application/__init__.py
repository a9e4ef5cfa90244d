"""
Application layer - session state, use cases and DTOs.

Coordinates domain services and ports; has no knowledge of HTTP or of the
concrete storage backends.
"""
