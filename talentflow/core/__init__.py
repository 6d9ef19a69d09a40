"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/, or db/
    - All functions are pure; only record factories draw random ids

Design Decisions:
    - Functional core separated from imperative shell: factories, slugs, filters
      and summaries are testable without a store
"""
