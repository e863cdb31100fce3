"""Application layer: use case orchestration over the record store."""
