"""Route Modules — one file per endpoint.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain business logic (delegate to core/ and the FeedClient)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
