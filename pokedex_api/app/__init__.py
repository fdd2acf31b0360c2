"""
Application package.

The service is split into ``core`` (configuration, logging and the
record store), ``schemas`` (pydantic models), ``services`` (lookup,
validation and response shaping) and ``api`` (FastAPI routers).
"""

from .main import app  # noqa: F401
