"""Command implementations for the yangkit CLI."""
