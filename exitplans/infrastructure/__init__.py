"""Infrastructure layer: adapters for Redis, HTTP providers and logging."""
