"""Core checks, analyzer registry, severity, config and logging."""
