"""
Ingestion pipeline package.

Turns page text into bounded chunks with size-capped metadata and writes them
into a namespace of the vector index.

Dependencies: langchain_text_splitters, langchain_core, pydantic
"""

from .entrypoint import IngestionPipeline
from .models import IngestResult, WebDocument
from .namespace import derive_namespace

__all__ = ["IngestResult", "IngestionPipeline", "WebDocument", "derive_namespace"]
