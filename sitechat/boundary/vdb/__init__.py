"""
Vector database boundary layer.

Provides namespaced vector store clients for storage and retrieval.
- FAISSVectorsStore: local development store
- S3VectorsStore: production S3 Vectors client (LangChain integration)

Dependencies: langchain_community, langchain_aws, langchain_google_genai
System role: Vector store adapter for RAG ingestion and retrieval
"""

from sitechat.boundary.vdb.vector_schemas import NamespacedVectorStore, VectorSearchResult

__all__ = ["NamespacedVectorStore", "VectorSearchResult"]
