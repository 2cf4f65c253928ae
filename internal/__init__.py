"""Internal application code: HTTP API layer."""
