"""Typed client for the iTunes catalog search endpoint."""
