"""Domain layer for TaskApp: entities, errors and pure rule services."""
