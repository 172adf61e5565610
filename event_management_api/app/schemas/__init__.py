"""
Pydantic schema definitions for API payloads.

Records are schema-less documents: each model declares the fields the
API knows about and lets any other field pass through untouched.
"""
