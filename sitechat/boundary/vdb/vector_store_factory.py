"""
Vector store factory for selecting between FAISS (dev) and S3 Vectors (prod).

Depends on the VECTOR_STORE_STORE_TYPE environment variable.
Provides a consistent interface regardless of underlying implementation.

Dependencies: sitechat.boundary.vdb, sitechat.configs
System role: Vector store instantiation and selection
"""

import logging

from sitechat.boundary.vdb.embeddings_wrapper import RetrievalEmbeddings
from sitechat.boundary.vdb.vector_schemas import NamespacedVectorStore
from sitechat.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def get_vector_store(settings: VectorStoreSettings) -> NamespacedVectorStore:
    """
    Build the vector store selected by configuration.

    Args:
        settings: Vector store settings

    Returns:
        FAISSVectorsStore or S3VectorsStore: Configured vector store instance

    Raises:
        ValueError: If the store type is unknown
    """
    store_type = settings.store_type.lower()
    if store_type not in ("faiss", "s3"):
        raise ValueError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'faiss' (dev) or 's3' (production)."
        )

    embeddings = RetrievalEmbeddings(
        model=settings.embedding_model,
        output_dimensionality=settings.embedding_dimension,
    )

    if store_type == "faiss":
        from sitechat.boundary.vdb.faiss_vectors_store import FAISSVectorsStore

        logger.info(f"{__name__}:get_vector_store - Creating FAISS vector store (local dev mode)")
        return FAISSVectorsStore(embeddings=embeddings, index_dir=settings.faiss_index_dir)

    from sitechat.boundary.vdb.s3_vectors_store import S3VectorsStore

    logger.info(f"{__name__}:get_vector_store - Creating S3 Vectors store (production mode)")
    return S3VectorsStore(
        embeddings=embeddings,
        vectors_bucket=settings.vectors_bucket,
        region=settings.aws_region,
    )
