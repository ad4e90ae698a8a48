"""Strategy interface."""
