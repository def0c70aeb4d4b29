"""Infrastructure layer - in-memory adapters and logging."""
