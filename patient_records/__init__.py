"""
Patient records service.

FastAPI application exposing create, list, lookup, treatment update and
delete operations over patient records stored in a relational database.
"""

__version__ = "0.1.0"
