"""Service layer: configuration."""
