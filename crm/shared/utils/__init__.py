"""Shared utilities: timestamps and id generators."""

from crm.shared.utils.datetime import utc_isoformat
from crm.shared.utils.generators import generate_cuid, generate_research_id

__all__ = [
    "generate_cuid",
    "generate_research_id",
    "utc_isoformat",
]
