"""Bookstore database management CLI.

Creates and drops the SQL schema for the configured Catalog Store provider.
Memory providers need no schema; both commands are no-ops for them.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from bookstore.domain import bookstore
    from bookstore.utils.db import setup_db

    print("Initializing bookstore domain...")
    bookstore.init()
    print("Creating bookstore database schema...")
    setup_db(bookstore)
    print("Done.")


def drop_database():
    from bookstore.domain import bookstore
    from bookstore.utils.db import drop_db

    print("Initializing bookstore domain...")
    bookstore.init()
    print("Dropping bookstore database schema...")
    drop_db(bookstore)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Bookstore database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
