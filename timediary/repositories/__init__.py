"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (JSON file, SQL table or
plain memory). Services depend on the key/value store contract and the
repositories here rather than touching a file or table directly.
"""
