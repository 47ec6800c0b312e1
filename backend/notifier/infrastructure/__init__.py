"""Infrastructure Layer — adapters for the database, the messaging provider and logging.

Invariants:
    - Every adapter implements a Protocol from core/repository_protocols.py
    - Library exceptions are mapped to core/errors.py types at this boundary
"""
