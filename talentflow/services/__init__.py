"""Services Layer — record handlers, timeline logging, seed generation.

Invariants:
    - Handlers split by entity family (max ~6 operations each)
    - RecordService binds every public operation explicitly (no auto-discovery)
    - Each public operation runs in exactly one store transaction

Design Decisions:
    - One handler file per entity family for locality
"""
