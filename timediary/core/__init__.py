"""
Core utilities shared across the diary backend.

This package hosts:
- configuration helpers (env vars, storage paths, backend selection)
- logging setup
- small helpers for ids and timestamps

Services and repositories depend on these primitives instead of reading
os.environ or building ids on their own.
"""
