"""Domain layer: value objects, aggregates, registry and repository contracts."""
