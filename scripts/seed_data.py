"""Seed script to create the schema and populate it with sample data."""

import argparse

from realestate.core.config import settings
from realestate.core.database import SessionLocal, init_db
from realestate.core.errors import UnsupportedOperationError
from realestate.core.logging import setup_logging
from realestate.seed import add_mountain_cabin, apply_example_changes, seed_database
from realestate.services.access import grant_select


def main() -> None:
    """Create tables, load sample data and optionally run the example statements."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--examples",
        action="store_true",
        help="also apply the example update/delete and insert the Mountain Cabin",
    )
    parser.add_argument(
        "--grant",
        action="store_true",
        help=f"grant SELECT on property to {settings.READONLY_PRINCIPAL}",
    )
    args = parser.parse_args()

    setup_logging()
    init_db()

    db = SessionLocal()
    try:
        if not seed_database(db):
            print("Database already has data. Skipping seed.")
            return

        print("Seed data created successfully!")

        if args.examples:
            apply_example_changes(db)
            cabin = add_mountain_cabin(db)
            print(f"Applied example changes; added property {cabin.property_id}: {cabin.title}")

        if args.grant:
            try:
                grant_select(db)
            except UnsupportedOperationError as exc:
                print(f"Skipping grant: {exc}")
            else:
                print(f"Granted SELECT on property to {settings.READONLY_PRINCIPAL}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
