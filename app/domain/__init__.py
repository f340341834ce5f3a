"""Pure domain pieces: the coaster record, its store and the admin credential.

These modules are free of FastAPI/HTTP concerns so they can be unit-tested and
reused by both the server and the smoke runner.
"""
__all__ = ["coaster", "store", "admin"]
