"""Core business logic layer.

Subpackages:
- feasibility: which recipes can be made from current storage
- pantry: storage analysis helpers (expiring soon, low stock)
"""
__all__ = ["feasibility", "pantry"]
