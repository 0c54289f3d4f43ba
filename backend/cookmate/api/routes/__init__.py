"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain business logic (delegate to services/)
    - Protected routes obtain their store through get_delegated_store

Design Decisions:
    - Explicit registration in main.py over auto-discovery
    - Unprefixed paths: the public contract is /services, /profile, ... (no /api/v1)
"""
