"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from crm.infrastructure.
"""

from crm.application.interfaces.repositories import (
    IEntitySearchRepository,
    IResearchRepository,
)

__all__ = [
    "IEntitySearchRepository",
    "IResearchRepository",
]
