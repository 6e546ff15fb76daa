"""
Application layer: use case orchestration over core logic and boundaries.
"""
