"""Domain layer - entities, value objects and the list service."""
