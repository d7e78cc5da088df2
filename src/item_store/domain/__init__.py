"""Domain layer - item entity and the in-memory record store."""
