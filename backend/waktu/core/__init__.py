"""Core Layer — pure domain logic, no IO, no async (except Protocol signatures).

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Functions are pure; parse_date reads the clock only when no date is given

Design Decisions:
    - Functional core separated from imperative shell
"""
