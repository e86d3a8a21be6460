"""Domain exceptions."""


class BitDotIOError(Exception):
    """Base exception for bitdotio."""

    pass


class ValidationError(BitDotIOError):
    """Validation failed for input data."""

    pass


# --- Connection pools ---


class PoolError(BitDotIOError):
    """Base for pool registry failures. Carries the database name."""

    def __init__(self, message: str, database_name: str) -> None:
        super().__init__(message)
        self.database_name = database_name


class PoolAlreadyExists(PoolError):
    """A live pool is already registered for the database."""

    def __init__(self, database_name: str) -> None:
        super().__init__(f"pool already exists for db '{database_name}'", database_name)


class PoolStateUnknown(PoolError):
    """A pool is registered but probing it failed for a reason other than closure."""

    def __init__(self, database_name: str) -> None:
        super().__init__(
            f"found an existing pool for db {database_name} and unable to verify closed state",
            database_name,
        )


class PoolCreationError(PoolError):
    """The pooling mechanism could not establish a pool."""

    def __init__(self, database_name: str, reason: object) -> None:
        super().__init__(f"unable to create pool for db {database_name}: {reason}", database_name)


class PoolNotFound(PoolError):
    """No pool is registered for the database."""

    def __init__(self, database_name: str, message: str | None = None) -> None:
        super().__init__(
            message or f"pool does not exist for db {database_name}", database_name
        )


class ConnectionAcquireError(PoolError):
    """A connection could not be acquired for the database."""

    def __init__(self, database_name: str, reason: object) -> None:
        super().__init__(
            f"unable to acquire a connection for db {database_name}: {reason}", database_name
        )


# --- Developer API ---


class APIError(BitDotIOError):
    """The API answered with an error status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"{status}: {body}")
        self.status = status
        self.body = body


class APIRequestError(BitDotIOError):
    """The request never produced a response (network, TLS, timeout)."""

    pass


class ResponseDecodeError(BitDotIOError):
    """The API returned a body that is not valid JSON."""

    pass
