"""
Adapters package - External service connections.
MongoDB client handling and on-disk blob storage.
"""

from adapters import mongo_adapter
from adapters.blob_store import BlobStore, generate_blob_name

__all__ = [
    "mongo_adapter",
    "BlobStore",
    "generate_blob_name",
]
