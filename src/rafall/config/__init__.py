"""Configuration layer — JSON site config, generator settings, logging."""
