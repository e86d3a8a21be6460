"""Fixed endpoints and connection parameters for bit.io."""

from typing import Final

from bitdotio import __version__

API_URL: Final[str] = "https://api.bit.io"
"""Base URL of the developer API."""

API_VERSION: Final[str] = "v2beta"
"""API version prefix joined onto every request path."""

APP_NAME: Final[str] = "python-bitdotio-sdk"
"""Identifies this client to bit.io."""

CLIENT_VERSION: Final[str] = __version__

USER_AGENT: Final[str] = f"{APP_NAME}/{CLIENT_VERSION}"
"""Sent as the HTTP User-Agent and as the Postgres user name."""

DB_HOST: Final[str] = "db.bit.io"
DB_PORT: Final[int] = 5432
SSL_MODE: Final[str] = "require"

POOL_MIN_CONNS: Final[int] = 0
"""Connections kept alive per pool when idle."""

MAX_CONN_IDLE_TIME: Final[str] = "299s"
"""One second less than the server-side timeout for idle connections."""

DEFAULT_POOL_MAX_SIZE: Final[int] = 4
"""Pool size used when no explicit maximum is requested (psycopg_pool default)."""
