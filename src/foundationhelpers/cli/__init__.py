"""Command-line interface for foundationhelpers."""
