"""Command-line entry point."""

import argparse
import asyncio
import sys

import psycopg

from bitdotio import __version__
from bitdotio.client import BitDotIO
from bitdotio.config import Settings, get_settings
from bitdotio.domain.exceptions import BitDotIOError
from bitdotio.domain.value_objects import QualifiedName
from bitdotio.log import configure_logging


async def list_databases(client: BitDotIO) -> int:
    databases = await client.list_databases()
    print(f"Found {len(databases)} databases:")
    for db in databases:
        print(f"- {db.name}")
    return 0


async def run_query(client: BitDotIO, database_name: str, sql: str, timeout: float | None) -> int:
    """Open a pool for the database, run one statement, print the rows."""
    QualifiedName.parse(database_name)
    await client.create_pool(database_name, timeout=timeout)
    async with await client.connect(database_name, timeout=timeout) as conn:
        cur = await conn.execute(sql)
        rows = await cur.fetchall() if cur.description is not None else None
        status = cur.statusmessage
        await conn.commit()
    if rows is None:
        print(status)
        return 0
    for row in rows:
        print("\t".join("" if v is None else str(v) for v in row))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bitdotio", description="bit.io command-line client")
    parser.add_argument("--token", help="Access token (default: $BITDOTIO_TOKEN)")
    parser.add_argument("--log-level", help="Logging level (default: $BITDOTIO_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("version", help="Print the client version")
    sub.add_parser("databases", help="List databases")
    query = sub.add_parser("query", help="Run SQL over a pooled direct connection")
    query.add_argument("database", help="Database name, owner/database")
    query.add_argument("sql", help="SQL statement")
    return parser


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    async with BitDotIO.from_settings(settings) as client:
        if args.command == "databases":
            return await list_databases(client)
        return await run_query(client, args.database, args.sql, settings.pool_timeout)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    if args.command == "version":
        print(f"bitdotio v{__version__}")
        return 0

    settings = get_settings()
    overrides = {}
    if args.token:
        overrides["token"] = args.token
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = settings.model_copy(update=overrides)
    configure_logging(settings.log_level)

    if not settings.token:
        print("error: no access token, set BITDOTIO_TOKEN or pass --token", file=sys.stderr)
        return 1
    try:
        return asyncio.run(_run(args, settings))
    except (BitDotIOError, psycopg.Error) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
