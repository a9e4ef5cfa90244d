"""
Database package - Infrastructure Layer

MongoDB client used by the Mongo durable slot backend.
"""

from cvd_platform.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
