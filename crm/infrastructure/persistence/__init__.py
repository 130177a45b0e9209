"""Persistence: database wiring, ORM models, repositories."""
