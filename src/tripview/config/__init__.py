"""Configuration — pydantic models, settings merge, discovery and logging."""
