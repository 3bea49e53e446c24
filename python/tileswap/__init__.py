"""Tile-swap puzzle engine."""
