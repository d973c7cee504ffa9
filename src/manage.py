"""Emporium management CLI.

Creates and drops the relational schema, and registers administrator
accounts (the public signup route only creates customers).

Usage:
    python src/manage.py setup-db
    python src/manage.py drop-db
    python src/manage.py create-admin --email ops@example.com --password ... \
        --first-name Ops --last-name Team --phone-number +15550100
"""

import argparse
import sys


def setup_database():
    from emporium.domain import emporium
    from emporium.utils.db import setup_db

    print("Initializing emporium domain...")
    emporium.init()
    print("Creating database schema...")
    setup_db(emporium)
    print("Done.")


def drop_database():
    from emporium.domain import emporium
    from emporium.utils.db import drop_db

    print("Initializing emporium domain...")
    emporium.init()
    print("Dropping database schema...")
    drop_db(emporium)
    print("Done.")


def create_admin(first_name, last_name, email, password, phone_number):
    from emporium.account.account import Role
    from emporium.account.registration import SignUp
    from emporium.domain import emporium

    emporium.init()
    with emporium.domain_context():
        account_id = emporium.process(
            SignUp(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password=password,
                phone_number=phone_number,
                role=Role.ADMIN.value,
            ),
            asynchronous=False,
        )
    print(f"Administrator {email} created with id {account_id}.")


def main():
    parser = argparse.ArgumentParser(description="Emporium management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Register an administrator account")
    admin_parser.add_argument("--first-name", required=True)
    admin_parser.add_argument("--last-name", required=True)
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)
    admin_parser.add_argument("--phone-number", required=True)

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "create-admin":
        create_admin(args.first_name, args.last_name, args.email, args.password, args.phone_number)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
