"""
Top-level package for the Event Management API.

All functionality lives in the ``app`` subpackage; see
``event_management_api.app.main`` for the application factory.
"""

__all__ = []
