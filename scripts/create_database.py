#!/usr/bin/env python
"""Create the PostgreSQL database from `DATABASE_URL` in .env.

Usage:
  python scripts/create_database.py [--password PASSWORD]
"""
import argparse
import logging
import os
import sys
from getpass import getpass

import psycopg2
from psycopg2 import sql
from psycopg2 import OperationalError
from sqlalchemy.engine import make_url

from cueclub.config import settings

logger = logging.getLogger("create_database")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    url = make_url(settings.DATABASE_URL)
    target_db = url.database
    if not target_db:
        logger.error("No database name found in DATABASE_URL")
        sys.exit(1)

    def try_connect(pw):
        return psycopg2.connect(
            dbname="postgres",
            user=url.username,
            password=pw,
            host=url.host or "localhost",
            port=url.port or 5432,
        )

    # Accept password from CLI or environment for non-interactive use
    parser = argparse.ArgumentParser()
    parser.add_argument("--password", "-p", help="Postgres admin password")
    args = parser.parse_args()

    try:
        conn = try_connect(args.password or os.getenv("POSTGRES_PASSWORD") or url.password)
    except OperationalError:
        if not sys.stdin.isatty():
            logger.error("Password authentication failed. Provide the password via --password or POSTGRES_PASSWORD.")
            sys.exit(1)
        print("Password authentication failed. Please enter the Postgres password for user:", url.username)
        try:
            conn = try_connect(getpass())
        except OperationalError as e:
            logger.error("Error connecting to Postgres: %s", e)
            sys.exit(1)

    conn.autocommit = True
    try:
        with conn.cursor() as cur:
            cur.execute("SELECT 1 FROM pg_database WHERE datname=%s", (target_db,))
            if cur.fetchone():
                logger.info("Database '%s' already exists.", target_db)
            else:
                cur.execute(sql.SQL("CREATE DATABASE {};").format(sql.Identifier(target_db)))
                logger.info("Database '%s' created.", target_db)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
