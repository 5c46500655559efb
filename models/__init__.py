"""Data access layer for guest registration records."""
