"""Simulation logic for a tile-based village tower-defence game: maps, routes, waves, enemies and towers."""

__version__ = "0.1.0"