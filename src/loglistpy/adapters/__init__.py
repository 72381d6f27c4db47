"""Logging facility adapters."""
