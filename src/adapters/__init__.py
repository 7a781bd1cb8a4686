"""Adapters: HTTP client, repository prober, exporters."""
