"""Services Layer: imperative shell around the pure greeting core.

Invariants:
    - Services receive their collaborators (JokeProvider) as arguments
    - Routes delegate here; services never touch FastAPI request objects
"""
