"""
create_tables.py — idempotent table creation script.
Run this before starting the server for the first time, or after schema changes.
Safe to run multiple times (all DDL uses IF NOT EXISTS).

Usage:
    python scripts/create_tables.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Ensure the project root is on the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chathistory.database import engine, check_db_connectivity
from chathistory.models import Base  # noqa: F401 — triggers model registration


async def main() -> None:
    """Create users, chats and conversations tables."""
    print("Checking database connectivity...")
    if not await check_db_connectivity():
        print("  ✗ database unreachable, check DATABASE_URL")
        await engine.dispose()
        sys.exit(1)
    print("  ✓ database reachable")

    print("Creating tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("  ✓ All tables created (IF NOT EXISTS)")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
