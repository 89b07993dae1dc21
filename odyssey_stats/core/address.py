"""Display-safe rendering of the proxy connection address.

The result is used as the ``server`` tag on every metric, so credentials
and TLS material must never survive into it.
"""

import re

import psycopg
from psycopg.conninfo import conninfo_to_dict

from odyssey_stats.core.exceptions import ConfigurationError

_URL_PREFIXES = ("postgres://", "postgresql://")
_SECRET_PAIR = re.compile(r"(password|sslcert|sslkey|sslmode|sslrootcert)=(?:\\.|\S)+ ?")


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'").replace(" ", "\\ ")


def canonical_address(address: str) -> str:
    """Turn a ``postgres://`` URL into sorted ``key=value`` pairs.

    Keyword strings are returned unchanged.

    Raises:
        ConfigurationError: if the URL cannot be parsed.
    """
    if not address.startswith(_URL_PREFIXES):
        return address
    try:
        params = conninfo_to_dict(address)
    except psycopg.ProgrammingError as exc:
        raise ConfigurationError(f"invalid connection URL: {exc}") from exc
    pairs = [f"{key}={_escape(str(value))}" for key, value in params.items() if value != ""]
    return " ".join(sorted(pairs))


def sanitized_address(address: str, output_address: str = "") -> str:
    """Return *address* with secrets removed, or *output_address* if given."""
    if output_address:
        return output_address
    return _SECRET_PAIR.sub("", canonical_address(address))
