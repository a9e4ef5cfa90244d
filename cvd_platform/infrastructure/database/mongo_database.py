"""
MongoDB Database - Infrastructure Layer

Thin client used by the Mongo-backed durable slot: connection handling,
single-document reads and upserts, and the slot collection indexes.
"""

from typing import Any, Dict, Optional

import pymongo.errors
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri, tz_aware=True)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents

        Returns:
            The document if found, None otherwise
        """
        return self.get_collection(collection_name).find_one(query)

    async def upsert_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace the document matching a query, inserting it when missing.

        Raises:
            OperationFailure: If the write is not acknowledged
        """
        result = self.get_collection(collection_name).replace_one(
            query, document, upsert=True
        )
        if not result.acknowledged:
            raise pymongo.errors.OperationFailure(
                f"Failed to upsert document in {collection_name}"
            )
        return document

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> int:
        """Delete the document matching a query; returns the deleted count."""
        result = self.get_collection(collection_name).delete_one(query)
        return result.deleted_count

    async def ping(self) -> None:
        """Round-trip to the server; raises PyMongoError when unreachable."""
        self.client.admin.command("ping")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self, collection_name: str) -> None:
        """
        Create the slot collection indexes.

        A unique index on the slot key, and a TTL index so the server drops
        entries once their expiry date has passed.
        """
        collection = self.get_collection(collection_name)
        try:
            collection.create_index(
                [("key", ASCENDING)], name="slot_key_idx", unique=True
            )
            collection.create_index(
                "expires_at", name="slot_expiry_idx", expireAfterSeconds=0
            )
        except pymongo.errors.OperationFailure:
            # Existing indexes with other options are left alone.
            pass
