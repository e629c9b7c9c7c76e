"""Logging for the mock parts API.

Everything goes through the ``aftermarket_api`` logger. Modules that call
``logging.getLogger(__name__)`` inside the package inherit its stdout handler.
Request lines gain ``tenant=``/``role=`` fields on the tenant-scoped fleet
endpoints.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "aftermarket_api"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

# Tenant ids are caller supplied; only a prefix is written to the log
TENANT_LOG_CHARS = 20


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Set the package log level and attach the stdout handler once."""
    pkg_logger = logging.getLogger(LOGGER_NAME)
    pkg_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not pkg_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        pkg_logger.addHandler(handler)

    return pkg_logger


logger = setup_logging()


def _scope(tenant: Optional[str], role: Optional[str]) -> str:
    fields = []
    if tenant is not None:
        fields.append(f"tenant={tenant[:TENANT_LOG_CHARS] or 'MISSING'}")
    if role is not None:
        fields.append(f"role={role}")
    return " ".join(fields)


def log_request(
    method: str,
    path: str,
    tenant: Optional[str] = None,
    role: Optional[str] = None,
) -> None:
    """Log an incoming request, with its tenant scope when known."""
    logger.info(f"REQUEST {method} {path} {_scope(tenant, role)}".rstrip())


def log_response(method: str, path: str, status: int, duration_ms: float) -> None:
    logger.info(
        f"RESPONSE {method} {path} status={status} duration_ms={duration_ms:.2f}"
    )


def log_tenant_rejected(method: str, path: str, role: str) -> None:
    """A fleet call arrived without ``x-tenant-id``."""
    logger.warning(f"BLOCKED {method} {path} {_scope('', role)}")


def log_error(message: str, exc: Optional[Exception] = None, path: Optional[str] = None) -> None:
    """Log a failure; the traceback is attached when ``exc`` is given."""
    where = f" path={path}" if path else ""
    logger.error(f"ERROR {message}{where}", exc_info=exc)
