"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or schemas/
    - All external calls mapped to core/errors.py exceptions

Design Decisions:
    - Thin wrappers over raw clients: routes only see the FeedClient protocol
"""
