"""
Vector store configuration settings.

Selects the backend (local FAISS or S3 Vectors) and the embedding model both
backends share.

Dependencies: pydantic, pydantic_settings
System role: Vector index configuration for ingestion and retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector index backend and embedding settings (env prefix VECTOR_STORE_)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(default="faiss", description="'faiss' (local files) or 's3' (S3 Vectors)")
    index_name: str = Field(default="sitechat", description="Index name returned by /ingest")

    # S3 Vectors: one index per namespace inside this bucket
    vectors_bucket: str = Field(default="sitechat-dev-vectors", description="S3 vector bucket")
    aws_region: str = Field(default="us-east-1", description="Region of the vector bucket")

    # FAISS: <namespace>.faiss / <namespace>.pkl under this directory
    faiss_index_dir: str = Field(default="/tmp/.sitechat_faiss", description="Local index directory")

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Gemini embedding model for chunks and questions",
    )
    embedding_dimension: int = Field(
        default=1024,
        description="Output dimensionality; must match existing S3 Vectors indexes",
        gt=0,
    )
