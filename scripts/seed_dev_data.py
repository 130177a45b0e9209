"""Seed dev data from docs/seed-data.json into Postgres.

Loads people, companies and projects. Rows with an id that already exists
are skipped, so the script can be re-run. Tables must already exist.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: docs/seed-data.json (relative to project root).
Requires: DATABASE_URL (postgresql+asyncpg://...).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy.dialects.postgresql import insert as pg_insert

from crm.core.config import get_settings
from crm.infrastructure.persistence import database
from crm.infrastructure.persistence.models import Company, Person, Project
from crm.shared.utils.generators import generate_cuid

# Seed file key -> ORM model
_SECTIONS = (
    ("people", Person),
    ("companies", Company),
    ("projects", Project),
)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _rows(model: Any, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Keep only known columns; assign a cuid when the item has no id."""
    columns = set(model.__table__.c.keys()) - {"created_at", "updated_at"}
    rows = []
    for item in items:
        row = {k: v for k, v in item.items() if k in columns}
        row.setdefault("id", generate_cuid())
        rows.append(row)
    return rows


async def run(path: Path) -> None:
    _load_env()
    get_settings.cache_clear()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL is not set; nothing to seed.", file=sys.stderr)
        sys.exit(1)

    data = json.loads(path.read_text(encoding="utf-8"))
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            for key, model in _SECTIONS:
                rows = _rows(model, data.get(key, []))
                if not rows:
                    continue
                stmt = pg_insert(model).values(rows).on_conflict_do_nothing(
                    index_elements=["id"]
                )
                result = await session.execute(stmt)
                print(f"  {key}: {result.rowcount} inserted, {len(rows)} in file")

    await database.dispose_engine()
    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "docs" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
