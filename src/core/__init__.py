"""
Core comparators, ordering primitives, and sort models.

This module contains the foundational building blocks that are independent
of external systems (storage, transport, UI frameworks, etc.).
"""
