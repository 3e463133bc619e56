"""Utility helpers shared by the renderer and the providers."""
