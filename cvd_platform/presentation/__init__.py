"""
Presentation Layer Package

HTTP surface of the prediction session.
"""

from cvd_platform.presentation import controllers

__all__ = ["controllers"]
