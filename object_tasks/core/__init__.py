"""Core Layer — pure exercise logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, api/, schemas/, or infrastructure/
    - Functions are deterministic; only remove_properties and sort_cities_array
      mutate their arguments, and both say so

Design Decisions:
    - Functional core separated from the HTTP shell
"""
