"""Database Infrastructure — declarative base, column types and write hooks.

Invariants:
    - All tables share one Base.metadata
    - Timestamp hooks are registered explicitly by the store
"""
