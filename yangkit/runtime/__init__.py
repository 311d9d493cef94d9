"""Runtime helpers for loading parser options."""
