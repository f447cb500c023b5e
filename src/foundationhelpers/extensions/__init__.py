"""Helpers over standard value types."""
