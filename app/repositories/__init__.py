"""Persistence helpers per entity type, over a SQLAlchemy session."""
