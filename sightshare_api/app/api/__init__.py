"""HTTP routes of the SightShare API."""
