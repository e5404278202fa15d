"""API services module."""
