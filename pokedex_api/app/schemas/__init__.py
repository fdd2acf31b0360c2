"""
Pydantic models for Pokedex records and mutation bodies.
"""
