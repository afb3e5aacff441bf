"""
Core domain models and contract validation.

This module contains the foundational building blocks that are independent
of external systems (storage, channels lookup, promotion persistence).
"""
