"""
High-level use cases for the diary backend.

Each service module orchestrates repositories to implement business rules
(register/login by username, comment on a diary, bump view counters).

Routers (FastAPI endpoints) call these services instead of manipulating the
store directly.
"""
