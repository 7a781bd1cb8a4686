"""Core: domain, configuration and resolution logic (no I/O)."""
