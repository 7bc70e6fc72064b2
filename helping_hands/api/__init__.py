"""API helpers package."""
