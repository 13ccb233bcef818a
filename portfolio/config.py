"""
Runtime configuration helpers for the portfolio site.

This module centralizes settings loading from environment variables so the
application code never hard-codes hosts, ports, or asset locations.
"""

import logging
import os


BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_STATIC_DIR = os.path.join(BASE_DIR, "static")
DEFAULT_META_PATH = os.path.join(BASE_DIR, "data", "mortgage-rates-meta.json")
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

HOST_ENV_VAR = "PORTFOLIO_HOST"
PORT_ENV_VAR = "PORTFOLIO_PORT"
DEBUG_ENV_VAR = "PORTFOLIO_DEBUG"
STATIC_DIR_ENV_VAR = "PORTFOLIO_STATIC_DIR"
META_PATH_ENV_VAR = "PORTFOLIO_META_PATH"
LOG_LEVEL_ENV_VAR = "PORTFOLIO_LOG_LEVEL"
TRUTHY_VALUES = ("1", "true", "yes", "on")


def is_truthy(value) -> bool:
    """
    Interpret an environment string as a boolean flag.

    :param value: Raw value, usually from ``os.environ``.
    :returns: True for ``1``, ``true``, ``yes`` or ``on`` (any case).
    """

    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_VALUES


def _parse_port(value) -> int:
    """
    Convert a port setting to an integer in the valid TCP range.

    :raises RuntimeError: If the value is not an integer in 1..65535.
    """

    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        raise RuntimeError(
            f"Invalid {PORT_ENV_VAR} value {value!r}: expected an integer."
        ) from None
    if not 1 <= port <= 65535:
        raise RuntimeError(
            f"Invalid {PORT_ENV_VAR} value {port}: expected 1-65535."
        )
    return port


def get_server_settings() -> dict:
    """
    Build keyword arguments for ``Flask.run`` from environment variables.

    Resolution order for each setting:
    1) ``PORTFOLIO_HOST`` / ``PORTFOLIO_PORT`` / ``PORTFOLIO_DEBUG`` if set.
    2) Module defaults.

    :raises RuntimeError: If ``PORTFOLIO_PORT`` is invalid.
    :returns: Dict with ``host``, ``port`` and ``debug`` keys.
    """

    return {
        "host": os.environ.get(HOST_ENV_VAR) or DEFAULT_HOST,
        "port": _parse_port(os.environ.get(PORT_ENV_VAR, DEFAULT_PORT)),
        "debug": is_truthy(os.environ.get(DEBUG_ENV_VAR)),
    }


def get_static_dir() -> str:
    """Return the directory holding the externally supplied site assets."""

    return os.path.abspath(os.environ.get(STATIC_DIR_ENV_VAR) or DEFAULT_STATIC_DIR)


def get_meta_path() -> str:
    """Return the path of the mortgage-rates metadata record."""

    return os.path.abspath(os.environ.get(META_PATH_ENV_VAR) or DEFAULT_META_PATH)


def get_log_level() -> int:
    """
    Resolve ``PORTFOLIO_LOG_LEVEL`` to a ``logging`` level number.

    :raises RuntimeError: If the name is not a known logging level.
    """

    name = (os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise RuntimeError(f"Unknown {LOG_LEVEL_ENV_VAR} value {name!r}.")
    return level


def configure_logging(level=None):
    """
    Configure root logging for the command-line entry point.

    :param level: Optional level number; defaults to ``get_log_level()``.
    """

    if level is None:
        level = get_log_level()
    logging.basicConfig(level=level, format=LOG_FORMAT)
