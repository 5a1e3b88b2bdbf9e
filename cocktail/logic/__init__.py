"""Core business logic layer.

Subpackages:
- search: the search coordinator (query, results, loading, outcome toasts)
- shopping: shopping list serialisation for print and export
"""
__all__ = ["search", "shopping"]
