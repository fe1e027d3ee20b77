"""Domain layer: entities and schema compatibility rules."""
