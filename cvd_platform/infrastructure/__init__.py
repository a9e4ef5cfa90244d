"""
Infrastructure layer - adapters for HTTP, storage and notifications.

Implements the ports declared by the domain layer.
"""
