"""Directed weighted graph editor with traversal, path search and DOT export."""

__version__ = "0.1.0"
__all__ = ["table", "graph", "visualization", "dialog"]