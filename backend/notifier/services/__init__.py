"""Services Layer — task orchestration and the side effects it drives.

Invariants:
    - Services receive collaborators through constructors (no module singletons)
    - Task dispatch uses explicit dict mapping (no auto-discovery)
"""
