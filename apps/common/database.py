"""Database connection check run once at process start."""
import logging
import sys

from django.db import DEFAULT_DB_ALIAS, connections
from django.db.utils import OperationalError

logger = logging.getLogger(__name__)


def connect_database(using=DEFAULT_DB_ALIAS):
    """
    Open the connection for ``using`` or terminate the process.

    There is no retry and no degraded mode: a server that cannot reach its
    database exits with status 1.
    """
    connection = connections[using]
    try:
        connection.ensure_connection()
    except OperationalError as e:
        logger.error("Database connection failed: %s", e)
        sys.exit(1)

    logger.info("Database connected successfully (%s)", connection.vendor)
    return connection
