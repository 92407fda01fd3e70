"""时光日记 backend: local key/value data layer plus a thin FastAPI surface."""
