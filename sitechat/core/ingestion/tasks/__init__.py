"""Ingestion pipeline tasks."""

from .chunking_task import ChunkingTask
from .metadata_task import MetadataBudgetTask, pack, serialized_size
from .vector_store_task import VectorStoreTask

__all__ = [
    "ChunkingTask",
    "MetadataBudgetTask",
    "VectorStoreTask",
    "pack",
    "serialized_size",
]
