"""
Top-level package for the Pokedex API.

All functionality lives in the ``app`` subpackage; the bundled seed
catalog is in ``data/pokedex.json``.
"""

__all__ = []
