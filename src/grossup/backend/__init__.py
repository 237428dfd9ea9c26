"""Backend services and HTTP application for GrossUp."""
