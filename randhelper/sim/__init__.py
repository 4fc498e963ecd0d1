"""
Determinism primitives.

This package intentionally contains *small* primitives (the seeded generator + the
startup seed source) so the sampling layer never touches global `random` or wall-clock time.
"""
