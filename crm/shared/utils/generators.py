"""Record ids: CUID2 strings, with a prefix for saved research."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()

RESEARCH_ID_PREFIX = "research-"


def generate_cuid() -> str:
    """New collision-resistant id for entity and analytics rows."""
    return _next_cuid()


def generate_research_id() -> str:
    """Id for a saved research record created without a caller-supplied id."""
    return RESEARCH_ID_PREFIX + generate_cuid()
