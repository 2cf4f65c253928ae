"""HTTP API: app factory, routes, schemas and response helpers."""
