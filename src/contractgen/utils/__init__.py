"""Shared helpers: typed errors, logging and serialization."""
