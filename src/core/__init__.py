"""Core of azureauth-cli: domain models, translation, configuration."""
