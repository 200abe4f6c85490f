"""Domain layer: entities, value objects, protocols and errors."""
