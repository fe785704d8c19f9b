"""Command-line interface for dpp-http."""
