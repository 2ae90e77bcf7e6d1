"""
Top‑level package for the SightShare API.

Backend of the SightShare photo galleries: it records guest check-ins
and photo orders in SQLite and serves them to the admin dashboard and
the desktop client.  All functionality lives in submodules under
``app``.
"""

__all__ = []
