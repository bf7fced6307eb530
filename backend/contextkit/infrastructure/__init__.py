"""Infrastructure Layer — process-level concerns (logging setup)."""
