"""
Pydantic schema definitions for API payloads.

Request bodies use the camelCase keys sent by the admin dashboard and
the desktop client (``galleryName``, ``galleryId``...); records read
back from the database keep their snake_case column names.
"""
