"""Core Layer — pure validation logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the HTTP shell: the validators are usable
      as a plain library without FastAPI in the call path
"""
