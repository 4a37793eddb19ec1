"""Rutas de la API."""

from . import bakes, recipes

__all__ = ["bakes", "recipes"]
