from __future__ import annotations

import logging

import mysql.connector

from ..attendance.repository import PreferencesStore
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone

logger = logging.getLogger(__name__)


class MySQLPreferencesStore(PreferencesStore):
    """Key/value bag persisted in the ``preferences`` table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, namespace: str, key: str) -> str:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT pref_value
                    FROM preferences
                    WHERE namespace=%s AND pref_key=%s
                    """,
                    (namespace, key),
                )
                row = fetchone(cur)
        except mysql.connector.Error as exc:
            raise StorageError(f"Cannot read {namespace}/{key}") from exc

        if not row:
            return ""
        return str(row["pref_value"] or "")

    def put(self, namespace: str, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO preferences(namespace, pref_key, pref_value)
                    VALUES(%s,%s,%s)
                    ON DUPLICATE KEY UPDATE pref_value=VALUES(pref_value)
                    """,
                    (namespace, key, value),
                )
        except mysql.connector.Error as exc:
            raise StorageError(f"Cannot write {namespace}/{key}") from exc

        logger.debug("Wrote %d chars to %s/%s", len(value), namespace, key)
