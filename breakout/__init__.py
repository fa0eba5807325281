"""Headless brick-breaker simulation: entities, collisions, world state."""
