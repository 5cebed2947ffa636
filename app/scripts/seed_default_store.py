"""
Seed script for the default storefront.

Creates the tables if needed and saves the Golden Dragon Emporium.
By default it only seeds an empty database; --force overwrites the
default store document (same id) even when other stores exist.

Usage:
    python app/scripts/seed_default_store.py [--force]
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from app.db import base  # noqa: E402, F401
from app.db.session import Base, SessionLocal, engine  # noqa: E402
from app.stores.defaults import default_store_config  # noqa: E402
from app.stores.services.store_service import StoreService  # noqa: E402


def seed_default_store(force: bool = False) -> None:
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        service = StoreService(db)
        if force:
            store = service.upsert_store(default_store_config())
            print(f"Saved default store: {store.slug}")
            return

        store = service.ensure_default_store()
        if store is None:
            print("Stores already present, nothing to seed (use --force to overwrite)")
        else:
            print(f"Seeded default store: {store.slug}")
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the default storefront")
    parser.add_argument(
        "--force", action="store_true", help="Overwrite the default store document"
    )
    args = parser.parse_args()

    seed_default_store(force=args.force)


if __name__ == "__main__":
    main()
