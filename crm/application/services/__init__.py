"""Application services: stateless domain helpers used by use cases."""

from crm.application.services.relevance import calculate_relevance

__all__ = ["calculate_relevance"]
