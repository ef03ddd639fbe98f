"""Learning bounded context - Infrastructure layer."""
