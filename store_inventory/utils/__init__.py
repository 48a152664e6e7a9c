"""Logging and path utilities."""
