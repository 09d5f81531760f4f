"""User control core - user registry, authentication and role capabilities."""

__version__ = "0.1.0"
