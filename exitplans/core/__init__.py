"""Core layer: configuration, result types, shared enums and errors."""
