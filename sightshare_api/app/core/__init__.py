"""Configuration, logging, error types and the SQLite database handle."""
