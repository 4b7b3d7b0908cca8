"""MongoDB adapter for the menu catalog.

Connections are opened explicitly at startup and handed to repositories;
nothing here keeps a module-level client.
"""

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.exceptions import ConnectionFailed

logger = logging.getLogger("menucatalog.mongo")


# ------------------ Connection ------------------
def connect(uri: Optional[str], timeout_ms: int = 5000) -> MongoClient:
    """Open a client and verify the server answers a ping.

    Raises:
        ConnectionFailed: if ``uri`` is empty or the server cannot be reached
    """
    if not uri:
        raise ConnectionFailed("MONGO_URI is not set")
    try:
        client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
    except PyMongoError as exc:
        raise ConnectionFailed(f"Invalid MongoDB URI: {exc}") from exc
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise ConnectionFailed(f"MongoDB connection failed: {exc}") from exc
    logger.info("Connected to MongoDB")
    return client


def get_collection(client: MongoClient, db_name: str, collection_name: str) -> Collection:
    """Return a collection handle; no I/O happens until it is queried."""
    return client[db_name][collection_name]


def close(client: Optional[MongoClient]):
    """Close MongoDB connection."""
    if client is None:
        return
    try:
        client.close()
        logger.info("MongoDB client closed")
    except PyMongoError:
        logger.exception("Error closing MongoDB client")
