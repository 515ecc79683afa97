"""Collection operations over JSON documents.

IMPORT CONVENTION:
- Accessed through DocumentStore properties (store.transactions, store.users)
- NO direct construction needed outside the db package

ID GENERATION POLICY:
Document IDs are always generated here with uid.generate_uuid(). Any "id"
key in a document passed to create() is ignored.

WRITES:
find_by_id_and_update and find_by_id_and_delete read and write inside one
BEGIN IMMEDIATE transaction. A concurrent writer waits on the lock (the
sqlite3 busy timeout) and then sees the committed document.

POPULATION:
Reference fields (e.g. a transaction's "user") hold the referenced
document's id. Passing populate=("user",) to a read replaces the id with
the referenced document. A dangling reference is left as the raw id.
"""

import json
import sqlite3
from typing import Any, TYPE_CHECKING

from ..utils import uid

if TYPE_CHECKING:
    from . import DocumentStore


class Collection:
    """A named set of JSON documents.

    Each method opens its own unit of work on the owning store.
    """

    def __init__(self, store: "DocumentStore", name: str, references: dict[str, str]):
        """Initialize collection operations.

        Args:
            store: Owning DocumentStore (provides connections)
            name: Table name; must come from the schema, never from user input
            references: Mapping of reference field -> referenced collection
        """
        self._store = store
        self.name = name
        self._references = references

    @staticmethod
    def _to_document(row: sqlite3.Row) -> dict[str, Any]:
        document = json.loads(row["data"])
        document["id"] = row["id"]
        return document

    def _get(self, conn: sqlite3.Connection, document_id: str) -> dict[str, Any] | None:
        row = conn.execute(
            f"SELECT id, data FROM {self.name} WHERE id = ?",
            (document_id,)
        ).fetchone()
        return self._to_document(row) if row else None

    def _populate(
        self,
        conn: sqlite3.Connection,
        document: dict[str, Any],
        fields: tuple[str, ...]
    ) -> dict[str, Any]:
        for field in fields:
            target = self._references.get(field)
            if target is None:
                raise ValueError(f"'{field}' is not a reference field of {self.name}")

            ref_id = document.get(field)
            if not isinstance(ref_id, str):
                continue

            referenced = self._store.collection(target)._get(conn, ref_id)
            if referenced is not None:
                document[field] = referenced
        return document

    def create(self, document: dict[str, Any]) -> dict[str, Any]:
        """Insert a document with an auto-generated id.

        Args:
            document: Field values; None values are dropped

        Returns:
            The stored document including its new "id"
        """
        data = {k: v for k, v in document.items() if k != "id" and v is not None}
        document_id = uid.generate_uuid()

        with self._store.connection() as conn:
            conn.execute(
                f"INSERT INTO {self.name} (id, data) VALUES (?, ?)",
                (document_id, json.dumps(data))
            )

        return {"id": document_id, **data}

    def find(self, populate: tuple[str, ...] = ()) -> list[dict[str, Any]]:
        """Get every document in insertion order."""
        with self._store.connection() as conn:
            rows = conn.execute(
                f"SELECT id, data FROM {self.name} ORDER BY rowid"
            ).fetchall()
            return [
                self._populate(conn, self._to_document(row), populate)
                for row in rows
            ]

    def find_by_id(
        self,
        document_id: str,
        populate: tuple[str, ...] = ()
    ) -> dict[str, Any] | None:
        """Get one document by id, or None if it does not exist."""
        with self._store.connection() as conn:
            document = self._get(conn, document_id)
            if document is None:
                return None
            return self._populate(conn, document, populate)

    def find_one(self, **conditions: Any) -> dict[str, Any] | None:
        """Get the first document whose top-level fields equal the conditions.

        Example:
            store.users.find_one(username="alice")
        """
        clauses = []
        params = []
        for field, value in conditions.items():
            clauses.append("json_extract(data, ?) = ?")
            params.extend([f"$.{field}", value])
        where_clause = " AND ".join(clauses) or "1=1"

        with self._store.connection() as conn:
            row = conn.execute(
                f"SELECT id, data FROM {self.name} WHERE {where_clause} "
                "ORDER BY rowid LIMIT 1",
                params
            ).fetchone()
        return self._to_document(row) if row else None

    def find_by_id_and_update(
        self,
        document_id: str,
        update: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Merge fields into a stored document.

        Only the keys in update are replaced; "id" cannot be changed.
        The read and the write run under one write lock, so concurrent
        updates to different fields of the same document both survive.

        Returns:
            The updated document, or None if no document has that id
        """
        with self._store.connection() as conn:
            conn.execute("BEGIN IMMEDIATE")
            document = self._get(conn, document_id)
            if document is None:
                return None

            document.update({k: v for k, v in update.items() if k != "id"})
            data = {k: v for k, v in document.items() if k != "id"}
            conn.execute(
                f"UPDATE {self.name} SET data = ? WHERE id = ?",
                (json.dumps(data), document_id)
            )
        return document

    def find_by_id_and_delete(self, document_id: str) -> dict[str, Any] | None:
        """Remove a document.

        Returns:
            The removed document, or None if no document has that id
        """
        with self._store.connection() as conn:
            conn.execute("BEGIN IMMEDIATE")
            document = self._get(conn, document_id)
            if document is None:
                return None
            conn.execute(f"DELETE FROM {self.name} WHERE id = ?", (document_id,))
        return document
