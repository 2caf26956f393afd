"""Core traversal, listing and path helpers."""
