"""HTTP API plumbing (middleware)."""
