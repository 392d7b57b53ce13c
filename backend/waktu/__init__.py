"""Waktu Application Package — calendar facts and "On This Day" proxy.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Explicit imports only, no star exports
"""

__version__ = "1.0.0"
