"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from crm.application.interfaces import IEntitySearchRepository, IResearchRepository
from crm.application.use_cases import SaveResearchService, SearchService

__all__ = [
    "IEntitySearchRepository",
    "IResearchRepository",
    "SaveResearchService",
    "SearchService",
]
