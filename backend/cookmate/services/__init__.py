"""Services Layer — onboarding, listings, verification and translation workflows.

Invariants:
    - Services receive a capability-scoped store, never a raw session
    - Business rules come from core/ checks; services only sequence them with I/O

Design Decisions:
    - One module per workflow for locality (ADR: ExMA no god objects)
"""
