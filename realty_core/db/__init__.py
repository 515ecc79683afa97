"""Document store for Realty Core.

The store keeps JSON documents in SQLite, one table per collection, and
exposes each collection through a Collection object:

    store = DocumentStore(settings.database_path)
    store.init_db()
    doc = store.transactions.create({"name": "123 Main St", ...})
    docs = store.transactions.find(populate=("user",))

CONNECTION LIFECYCLE:
Every collection operation opens its own connection through
DocumentStore.connection(), which commits on success, rolls back on error
and always closes. There is no connection shared between requests.

INJECTION:
The Flask app receives its store through create_app(store=...) and keeps it
in app.extensions. Handlers reach it with get_store(), so tests can swap in
any object that exposes the same collections.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from flask import Flask, current_app

from ..exceptions import ConflictError, DatabaseError
from .collection import Collection

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

# Collection name -> {reference field: referenced collection}
COLLECTIONS = {
    "users": {},
    "transactions": {"user": "users"},
}

_EXTENSION_KEY = "realty_store"


class DocumentStore:
    """SQLite-backed document store.

    Provides access to collections through properties and owns connection
    creation and transaction boundaries.
    """

    def __init__(self, database_path: str):
        """Initialize the store.

        Args:
            database_path: Path to the SQLite database file. Parent
                directories are created on first connection.
        """
        self.database_path = database_path
        self._collections: dict[str, Collection] = {}

    def _create_connection(self) -> sqlite3.Connection:
        """Create a fresh database connection.

        Returns:
            SQLite connection with row_factory set to sqlite3.Row
            and foreign keys enabled.
        """
        db_path = Path(self.database_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(db_path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Open a connection for one unit of work.

        Commits when the block exits normally, rolls back otherwise.
        Driver errors are translated into the application's hierarchy:
        integrity violations become ConflictError, everything else
        DatabaseError with the driver detail kept out of the message.

        Raises:
            ConflictError: On a uniqueness/integrity violation
            DatabaseError: On any other sqlite3 failure
        """
        try:
            conn = self._create_connection()
        except sqlite3.Error as e:
            logger.error(f"Could not open database {self.database_path}: {e}")
            raise DatabaseError("Database unavailable") from e

        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            logger.warning(f"Integrity violation: {e}")
            raise ConflictError("Record conflicts with an existing record") from e
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Database operation failed: {e}")
            raise DatabaseError("Database operation failed") from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def collection(self, name: str) -> Collection:
        """Get a collection by name.

        Raises:
            KeyError: If the collection is not part of the schema
        """
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection '{name}'")
        if name not in self._collections:
            self._collections[name] = Collection(self, name, COLLECTIONS[name])
        return self._collections[name]

    @property
    def transactions(self) -> Collection:
        """Transaction records."""
        return self.collection("transactions")

    @property
    def users(self) -> Collection:
        """User accounts."""
        return self.collection("users")

    def init_db(self) -> None:
        """Apply schema.sql. Safe to run on an initialized database."""
        with self.connection() as conn:
            conn.executescript(SCHEMA_PATH.read_text())
        logger.info(f"Database initialized at {self.database_path}")

    def get_schema_version(self) -> str:
        """Get current schema version from _schema_metadata table."""
        with self.connection() as conn:
            row = conn.execute(
                "SELECT value FROM _schema_metadata WHERE key = 'version'"
            ).fetchone()
        return row[0] if row else "unknown"


def init_app(app: Flask, store: DocumentStore) -> None:
    """Attach a store to a Flask app."""
    app.extensions[_EXTENSION_KEY] = store


def get_store() -> DocumentStore:
    """Get the store attached to the current app."""
    return current_app.extensions[_EXTENSION_KEY]


__all__ = ["Collection", "DocumentStore", "get_store", "init_app"]
