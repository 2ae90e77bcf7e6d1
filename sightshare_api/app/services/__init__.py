"""
Service layer.

Each service receives the shared :class:`~sightshare_api.app.core.db.Database`
at construction time and encapsulates the SQL for one concern, keeping
the API handlers free of persistence details.
"""
