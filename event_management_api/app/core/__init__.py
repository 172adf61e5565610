"""Configuration, logging and record store."""
