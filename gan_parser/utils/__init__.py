"""Utility helpers: logging setup and task-tree traversal."""
