"""Storefront database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed-db    # Load demo categories, products, users and carts
"""

import argparse
import sys


def _domain():
    from storefront.bootstrap import init_storefront

    return init_storefront()


def setup_database():
    from storefront.utils.db import setup_db

    domain = _domain()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _domain()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def seed_database():
    from storefront.utils.seed import seed_db

    domain = _domain()
    print("Seeding storefront demo data...")
    with domain.domain_context():
        counts = seed_db(domain)
    if counts:
        for name, count in counts.items():
            print(f"  {name}: {count}")
    else:
        print("  Catalogue already populated; nothing to do.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-db", help="Load demo data into an empty database")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-db":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
