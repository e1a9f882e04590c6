"""Ingestion pipeline models."""

from .document import WebDocument
from .ingest_result import IngestResult

__all__ = ["IngestResult", "WebDocument"]
