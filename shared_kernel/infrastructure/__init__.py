"""Infrastructure layer - adapters for the domain ports."""
