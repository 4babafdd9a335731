"""Station directory storage, configuration and validation."""
