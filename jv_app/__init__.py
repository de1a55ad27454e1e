"""Application services: document loading and viewer settings."""
