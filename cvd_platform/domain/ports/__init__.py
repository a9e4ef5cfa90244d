"""Ports implemented by the infrastructure layer."""

from .health_check import IHealthCheckService
from .key_value_slot import IKeyValueSlot
from .notifier import INotificationFeed, INotifier

__all__ = ["IHealthCheckService", "IKeyValueSlot", "INotificationFeed", "INotifier"]
