"""Infrastructure Layer — database, identity, language model and logging adapters.

Invariants:
    - Infrastructure imports only core/ types and errors, never workflow logic
    - All external calls wrapped with retry/timeout/error mapping
    - Every row read or written on behalf of a caller goes through store.py

Design Decisions:
    - Resilient wrappers over raw clients (ADR: ExMA single responsibility)
"""
