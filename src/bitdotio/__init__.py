"""bitdotio - async client for the bit.io developer API and pooled Postgres connections."""

__version__ = "0.1.0"

from bitdotio.client import BitDotIO  # noqa: E402

__all__ = ["BitDotIO", "__version__"]
