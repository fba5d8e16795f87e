"""Core: configuration, domain models and the sink pipeline."""
