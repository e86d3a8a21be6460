"""bit.io connection strings and PostgreSQL async connection pools."""

import re
from dataclasses import dataclass

from psycopg.conninfo import conninfo_to_dict, make_conninfo
from psycopg_pool import AsyncConnectionPool

from bitdotio.constants import (
    DB_HOST,
    DB_PORT,
    DEFAULT_POOL_MAX_SIZE,
    MAX_CONN_IDLE_TIME,
    POOL_MIN_CONNS,
    SSL_MODE,
    USER_AGENT,
)

# One top-level key=value pair. Quoted values may hold spaces and escaped quotes.
_PARAM = re.compile(r"\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*('(?:[^'\\]|\\.)*'|\S*)")
_POOL_KEYS = frozenset({"pool_min_conns", "pool_max_conns", "pool_max_conn_idle_time"})
_DURATION = re.compile(r"^(\d+(?:\.\d+)?)(ms|s|m|h)$")
_DURATION_SECONDS = {"ms": 0.001, "s": 1.0, "m": 60.0, "h": 3600.0}
_DEFAULT_MAX_IDLE = 10 * 60.0
_DEFAULT_OPEN_TIMEOUT = 30.0


@dataclass(frozen=True)
class PoolSettings:
    """Sizing and idle settings parsed from a conninfo string."""

    min_size: int = POOL_MIN_CONNS
    max_size: int = DEFAULT_POOL_MAX_SIZE
    max_idle: float = _DEFAULT_MAX_IDLE


def build_conninfo(access_token: str, database_name: str, max_connections: int = 0) -> str:
    """Build the conninfo string for a bit.io database.

    ``max_connections=0`` leaves ``pool_max_conns`` out so the pool's own
    default size applies.
    """
    conninfo = make_conninfo(
        user=USER_AGENT,
        password=access_token,
        host=DB_HOST,
        port=DB_PORT,
        dbname=database_name,
        sslmode=SSL_MODE,
    )
    conninfo += (
        f" pool_min_conns={POOL_MIN_CONNS}"
        f" pool_max_conn_idle_time={MAX_CONN_IDLE_TIME}"
    )
    if max_connections != 0:
        conninfo += f" pool_max_conns={max_connections}"
    return conninfo


def parse_duration(value: str) -> float:
    """Parse ``299s``, ``500ms``, ``5m`` or ``1h`` into seconds."""
    m = _DURATION.match(value)
    if not m:
        raise ValueError(f"invalid duration {value!r}")
    return float(m.group(1)) * _DURATION_SECONDS[m.group(2)]


def parse_pool_conninfo(conninfo: str) -> tuple[str, PoolSettings]:
    """Split pool parameters out of a conninfo string.

    Only top-level ``key=value`` pairs are read, so quoted values that look
    like pool parameters stay with libpq. Returns the libpq-only conninfo and
    the parsed pool settings. Raises ValueError on unknown ``pool_*`` keys
    or malformed values.
    """
    params: dict[str, str] = {}
    libpq_pairs: list[str] = []
    pos = 0
    while conninfo[pos:].strip():
        m = _PARAM.match(conninfo, pos)
        if m is None:
            # Leave the rest for libpq to reject.
            libpq_pairs.append(conninfo[pos:].strip())
            break
        key = m.group(1)
        if key.startswith("pool_"):
            params[key] = m.group(2)
        else:
            libpq_pairs.append(m.group(0).strip())
        pos = m.end()

    unknown = set(params) - _POOL_KEYS
    if unknown:
        raise ValueError(f"unknown pool parameters: {', '.join(sorted(unknown))}")

    min_size = int(params.get("pool_min_conns", POOL_MIN_CONNS))
    if "pool_max_conns" in params:
        max_size = int(params["pool_max_conns"])
    else:
        max_size = max(DEFAULT_POOL_MAX_SIZE, min_size)
    max_idle = (
        parse_duration(params["pool_max_conn_idle_time"])
        if "pool_max_conn_idle_time" in params
        else _DEFAULT_MAX_IDLE
    )
    libpq_conninfo = " ".join(libpq_pairs)
    return libpq_conninfo, PoolSettings(min_size=min_size, max_size=max_size, max_idle=max_idle)


async def establish_pool(conninfo: str, timeout: float | None = None) -> AsyncConnectionPool:
    """Create and open an async connection pool from a bit.io conninfo string.

    With ``pool_min_conns=0`` opening does not connect; connections are made
    on first acquire. Raises ``psycopg.ProgrammingError`` for a malformed
    conninfo and ValueError for bad pool settings.
    """
    libpq_conninfo, settings = parse_pool_conninfo(conninfo)
    params = conninfo_to_dict(libpq_conninfo)
    pool = AsyncConnectionPool(
        conninfo=libpq_conninfo,
        min_size=settings.min_size,
        max_size=settings.max_size,
        max_idle=settings.max_idle,
        name=params.get("dbname"),
        open=False,
    )
    try:
        await pool.open(
            wait=True,
            timeout=_DEFAULT_OPEN_TIMEOUT if timeout is None else timeout,
        )
    except BaseException:
        await pool.close()
        raise
    return pool
