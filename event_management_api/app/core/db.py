"""
Document store built on SQLite.

Each collection (``events``, ``attendees``, ``organizers``) is a table
holding one JSON document per row, keyed by a 24-character hexadecimal
identity.  Documents are schema-less: whatever fields a client sends
are stored as-is, and reads return them unchanged plus the ``id``.

A single ``DocumentStore`` is opened when the application starts
(see ``main.create_app``) and handed to the request handlers through
``app.state``; this module keeps no global connection.

By-id operations follow the usual document-database contract:

* a malformed identity raises ``InvalidIdentifier`` before any query;
* a well-formed identity that matches nothing returns ``None``.

Mapping ``None`` to ``RecordNotFound`` is left to the service layer.
"""

import itertools
import json
import logging
import os
import random
import re
import sqlite3
import time
from typing import Any, Dict, Iterable, List, Optional

from fastapi import Request

logger = logging.getLogger(__name__)

COLLECTIONS = ("events", "attendees", "organizers")

_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")
_PROCESS_RANDOM = os.urandom(5)
_counter = itertools.count(random.randint(0, 0xFFFFFF))


class StoreError(Exception):
    """Base class for record store failures."""


class StoreConnectionError(StoreError):
    """The store could not be opened."""


class InvalidIdentifier(StoreError, ValueError):
    """The supplied identity is not a well-formed token."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid identifier: {value!r}")
        self.value = value


class RecordNotFound(StoreError, LookupError):
    """No record with the requested identity exists."""

    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(f"{collection} record {record_id} not found")
        self.collection = collection
        self.record_id = record_id


def new_object_id() -> str:
    """Return a fresh identity.

    Layout: 4-byte big-endian Unix timestamp, 5 per-process random bytes
    and a 3-byte wrapping counter, hex encoded.
    """
    timestamp = int(time.time()).to_bytes(4, "big")
    count = (next(_counter) & 0xFFFFFF).to_bytes(3, "big")
    return (timestamp + _PROCESS_RANDOM + count).hex()


def is_valid_object_id(value: Any) -> bool:
    return isinstance(value, str) and bool(_OBJECT_ID_RE.fullmatch(value))


def _normalise_id(value: Any) -> str:
    if not is_valid_object_id(value):
        raise InvalidIdentifier(value)
    return value.lower()


def _check_collection(collection: str) -> str:
    # Table names are interpolated into SQL, so only known names pass.
    if collection not in COLLECTIONS:
        raise StoreError(f"Unknown collection: {collection}")
    return collection


MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        -- Document collections.  ``seq`` preserves insertion order,
        -- ``id`` is the public identity and ``body`` the JSON document.
        CREATE TABLE IF NOT EXISTS events (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            id TEXT NOT NULL UNIQUE,
            body TEXT NOT NULL DEFAULT '{}',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS attendees (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            id TEXT NOT NULL UNIQUE,
            body TEXT NOT NULL DEFAULT '{}',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS organizers (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            id TEXT NOT NULL UNIQUE,
            body TEXT NOT NULL DEFAULT '{}',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
]


def _resolve_database_url(database_url: str) -> tuple[str, bool]:
    """Translate a connection string into ``sqlite3.connect`` arguments.

    Returns the target and whether it must be opened as a URI.
    """
    if database_url.startswith("sqlite:///"):
        database_url = database_url[len("sqlite:///"):]
    if database_url.startswith("file:"):
        return database_url, True
    return database_url, False


class DocumentStore:
    """Schema-less collections over a single shared SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    @classmethod
    def connect(cls, database_url: str) -> "DocumentStore":
        """Open the store and apply pending migrations.

        Raises ``StoreConnectionError`` if the database cannot be opened
        or migrated.
        """
        target, uri = _resolve_database_url(database_url)
        try:
            # Requests may be served from a worker thread other than the
            # one that opened the connection (e.g. under the test client).
            conn = sqlite3.connect(target, uri=uri, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            store = cls(conn)
            store.migrate()
        except sqlite3.Error as exc:
            raise StoreConnectionError(f"Cannot open store at {database_url!r}: {exc}") from exc
        return store

    def migrate(self) -> int:
        """Apply migrations newer than the recorded version.

        Returns the schema version after migrating.
        """
        cursor = self._conn.cursor()
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0
        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.info("Applied store migration %s", version)
                current_version = version
        self._conn.commit()
        return current_version

    def close(self) -> None:
        self._conn.close()

    @staticmethod
    def _to_document(row: sqlite3.Row) -> Dict[str, Any]:
        return {"id": row["id"], **json.loads(row["body"])}

    @staticmethod
    def _dump_body(fields: Dict[str, Any]) -> str:
        return json.dumps({k: v for k, v in fields.items() if k != "id"})

    def find(self, collection: str) -> List[Dict[str, Any]]:
        table = _check_collection(collection)
        rows = self._conn.execute(f"SELECT id, body FROM {table} ORDER BY seq").fetchall()
        return [self._to_document(row) for row in rows]

    def find_by_id(self, collection: str, record_id: Any) -> Optional[Dict[str, Any]]:
        table = _check_collection(collection)
        key = _normalise_id(record_id)
        row = self._conn.execute(f"SELECT id, body FROM {table} WHERE id = ?", (key,)).fetchone()
        return self._to_document(row) if row else None

    def find_by_ids(self, collection: str, record_ids: Iterable[Any]) -> Dict[str, Dict[str, Any]]:
        """Fetch several records at once, keyed by identity.

        Malformed and unknown identities are skipped rather than raising,
        since callers use this for resolving stored references.
        """
        table = _check_collection(collection)
        keys = sorted({value.lower() for value in record_ids if is_valid_object_id(value)})
        if not keys:
            return {}
        placeholders = ", ".join("?" for _ in keys)
        rows = self._conn.execute(
            f"SELECT id, body FROM {table} WHERE id IN ({placeholders})", tuple(keys)
        ).fetchall()
        return {row["id"]: self._to_document(row) for row in rows}

    def insert(self, collection: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Store a new document under a fresh identity and return it."""
        table = _check_collection(collection)
        record_id = new_object_id()
        with self._conn:
            self._conn.execute(
                f"INSERT INTO {table} (id, body) VALUES (?, ?)",
                (record_id, self._dump_body(fields)),
            )
        return self.find_by_id(collection, record_id)

    def update_by_id(
        self, collection: str, record_id: Any, fields: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Merge ``fields`` into an existing document.

        Supplied keys overwrite stored ones (``null`` included); keys not
        supplied are kept.  Returns the updated document, or ``None`` if
        no document has this identity.
        """
        table = _check_collection(collection)
        key = _normalise_id(record_id)
        with self._conn:
            row = self._conn.execute(f"SELECT id, body FROM {table} WHERE id = ?", (key,)).fetchone()
            if row is None:
                return None
            body = json.loads(row["body"])
            body.update(fields)
            self._conn.execute(
                f"UPDATE {table} SET body = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (self._dump_body(body), key),
            )
        return self.find_by_id(collection, key)

    def delete_by_id(self, collection: str, record_id: Any) -> Optional[Dict[str, Any]]:
        """Remove a document and return it, or ``None`` if it did not exist."""
        table = _check_collection(collection)
        key = _normalise_id(record_id)
        with self._conn:
            row = self._conn.execute(f"SELECT id, body FROM {table} WHERE id = ?", (key,)).fetchone()
            if row is None:
                return None
            self._conn.execute(f"DELETE FROM {table} WHERE id = ?", (key,))
        return self._to_document(row)

    def count(self, collection: str) -> int:
        table = _check_collection(collection)
        return self._conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def get_store(request: Request) -> DocumentStore:
    """FastAPI dependency returning the store opened at startup."""
    return request.app.state.store
