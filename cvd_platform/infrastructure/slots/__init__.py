"""Durable slot backends."""

from .file_slot import FileKeyValueSlot
from .memory_slot import InMemoryKeyValueSlot
from .mongo_slot import MongoKeyValueSlot

__all__ = ["FileKeyValueSlot", "InMemoryKeyValueSlot", "MongoKeyValueSlot"]
