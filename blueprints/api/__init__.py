"""Service-level API blueprint."""
