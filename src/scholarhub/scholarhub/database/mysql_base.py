from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, List

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConflictError, TransportError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, rollback on error.

    Driver errors surface as ConflictError (duplicate key) or TransportError.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.exception("Database unreachable")
        raise TransportError("Storage backend unreachable") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        conn.rollback()
        if e.errno == errorcode.ER_DUP_ENTRY:
            raise ConflictError(str(e.msg or e)) from e
        logger.exception("Database rejected the request")
        raise TransportError("Storage backend rejected the request") from e
    except mysql.connector.Error as e:
        conn.rollback()
        logger.exception("Database request failed")
        raise TransportError("Storage backend request failed") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Dict[str, Any] | None:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def dump_ids(ids) -> str:
    return json.dumps([int(i) for i in ids or ()])


def load_ids(value: Any) -> tuple[int, ...]:
    """Decode an id-set column (JSON text; tolerates legacy comma-separated text)."""
    if value is None or value == "":
        return ()
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            return tuple(int(i) for i in json.loads(text))
        return tuple(int(part) for part in text.split(",") if part.strip())
    return tuple(int(i) for i in value)
