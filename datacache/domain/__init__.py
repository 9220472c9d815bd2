"""Domain layer: entities, value objects and contracts."""
