"""
Core domain logic.

Ingestion (chunking, metadata budgeting, namespaces) and retrieval.
"""
