"""Create or reset administrator accounts.

Usage::

    python scripts/create_admins.py admin1:secret admin2:other
    python scripts/create_admins.py --print-sql admin1:secret   # only print INSERTs

Passwords are stored as werkzeug hashes, the format the login check expects.
"""

from __future__ import annotations

import argparse
import importlib

from werkzeug.security import generate_password_hash

from config import get_settings_module

from event_manager.database.bootstrap import AdminSeed, ensure_admins


def parse_pair(value: str) -> AdminSeed:
    username, sep, password = value.partition(":")
    if not sep or not username.strip() or not password:
        raise argparse.ArgumentTypeError(f"expected username:password, got {value!r}")
    return AdminSeed(username=username.strip(), password=password)


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("admins", nargs="+", type=parse_pair, metavar="USERNAME:PASSWORD")
    parser.add_argument("--print-sql", action="store_true", help="print INSERT statements instead of writing to the database")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    if args.print_sql:
        print(f"USE {db_config.get('database')};")
        for admin in args.admins:
            print(
                "INSERT INTO admins (username, password) VALUES "
                f"({_quote(admin.username)}, {_quote(generate_password_hash(admin.password))});"
            )
        return

    touched = ensure_admins(db_config, args.admins)
    print(f"OK: admins ready -> {', '.join(touched)}")


if __name__ == "__main__":
    main()
