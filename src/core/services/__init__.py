"""Core services (orchestration over domain models and interfaces)."""
