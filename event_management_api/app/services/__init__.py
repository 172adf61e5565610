"""
Service layer.

Each service wraps the record store for one domain.  Services are
constructed per request with the store opened at startup, translate
missing records into ``RecordNotFound`` and otherwise return plain
documents (dicts) for the API layer to shape.
"""
