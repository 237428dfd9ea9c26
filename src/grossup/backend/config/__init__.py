"""Configuration data and loaders."""
