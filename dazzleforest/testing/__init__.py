"""Testing utilities for DazzleForest consumers."""

from .fixtures import menu_forest, filesystem_forest, chain_forest

__all__ = ["menu_forest", "filesystem_forest", "chain_forest"]
