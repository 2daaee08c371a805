"""Core changelog pipeline."""
