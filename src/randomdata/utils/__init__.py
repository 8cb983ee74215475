"""Shared helpers: exception taxonomy and logging."""
