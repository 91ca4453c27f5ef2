"""Pure services built on top of the domain models."""
