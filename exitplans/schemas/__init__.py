"""Request and response schemas (pydantic, camelCase on the wire)."""
