"""Boundary adapters for external systems (relational database)."""
