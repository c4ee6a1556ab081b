"""Object Tasks — exercises on plain mappings, sequences and a CSS selector builder.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
