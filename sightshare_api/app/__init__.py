"""
Application package initializer.

The API is organised into logical pieces: ``core`` (configuration,
logging, errors and the database), ``schemas`` (request and response
models), ``services`` (one per table plus export and statistics) and
``api`` (the FastAPI routers).
"""

from .main import app  # noqa: F401
