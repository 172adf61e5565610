"""
Application package.

``core`` holds configuration, logging and the record store,
``schemas`` the request/response models, ``services`` the per-entity
data access and ``api`` the HTTP routes.
"""

from .main import app  # noqa: F401
