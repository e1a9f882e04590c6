"""Application layer: use case services over the core pipelines."""
