"""
API package.

``router.py`` aggregates the domain routers defined in ``endpoints``;
the application mounts it under ``/api``.  ``deps.py`` holds the
FastAPI dependencies that hand services the store opened at startup.
"""
