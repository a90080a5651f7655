"""SQLite-backed document store for knowledge items."""

import json
import logging
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from second_brain.lib.errors import InvalidInputError, StorageError
from second_brain.models.knowledge import KnowledgeItem, utc_now
from second_brain.storage.knowledge_store import DocumentStore, ItemPredicate

logger = logging.getLogger(__name__)

COLUMNS = (
    "id",
    "title",
    "content",
    "summary",
    "type",
    "tags",
    "source_url",
    "file_name",
    "file_type",
    "file_url",
    "user_id",
    "is_public",
    "created_at",
    "updated_at",
)

# Fields that an update may not overwrite.
IMMUTABLE_FIELDS = {"id", "created_at"}


class SQLiteKnowledgeStore(DocumentStore):
    """Stores knowledge items in a single SQLite table."""

    def __init__(self, db_path: str):
        """Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    @contextmanager
    def _get_connection(self):
        """Open a connection for one operation, committing on success."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            logger.error(f"Cannot open database {self.db_path}: {e}")
            raise StorageError(f"Cannot open database: {e}") from e

        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Database error: {e}")
            raise StorageError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_schema(self):
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS knowledge_items (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    content TEXT NOT NULL,
                    summary TEXT,
                    type TEXT NOT NULL DEFAULT 'note' CHECK(type IN ('note', 'link', 'insight')),
                    tags TEXT NOT NULL DEFAULT '[]',
                    source_url TEXT,
                    file_name TEXT,
                    file_type TEXT,
                    file_url TEXT,
                    user_id TEXT NOT NULL,
                    is_public BOOLEAN NOT NULL DEFAULT 0,
                    created_at TIMESTAMP NOT NULL,
                    updated_at TIMESTAMP NOT NULL
                )
            """)
            cursor.execute("CREATE INDEX IF NOT EXISTS idx_items_user ON knowledge_items(user_id)")
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_items_public ON knowledge_items(is_public)"
            )

            logger.info(f"Knowledge store initialized at {self.db_path}")

    @staticmethod
    def _row_to_item(row: sqlite3.Row) -> KnowledgeItem:
        data = dict(row)
        data["tags"] = json.loads(data["tags"] or "[]")
        data["is_public"] = bool(data["is_public"])
        data["created_at"] = datetime.fromisoformat(data["created_at"])
        data["updated_at"] = datetime.fromisoformat(data["updated_at"])
        return KnowledgeItem.model_validate(data)

    @staticmethod
    def _item_to_row(item: KnowledgeItem) -> tuple:
        return (
            item.id,
            item.title,
            item.content,
            item.summary,
            item.type,
            json.dumps(item.tags),
            item.source_url,
            item.file_name,
            item.file_type,
            item.file_url,
            item.user_id,
            int(item.is_public),
            item.created_at.isoformat(),
            item.updated_at.isoformat(),
        )

    @staticmethod
    def _validate(data: dict[str, Any]) -> KnowledgeItem:
        try:
            return KnowledgeItem.model_validate(data)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise InvalidInputError(problems) from e

    def find(self, predicate: ItemPredicate | None = None) -> list[KnowledgeItem]:
        # Snapshot read; the predicate runs after the connection is closed.
        with self._get_connection() as conn:
            rows = conn.execute("SELECT * FROM knowledge_items ORDER BY rowid").fetchall()

        items = [self._row_to_item(row) for row in rows]
        if predicate is None:
            return items
        return [item for item in items if predicate(item)]

    def create(self, doc: dict[str, Any]) -> KnowledgeItem:
        now = utc_now()
        data = {"created_at": now, "updated_at": now, **doc, "id": uuid.uuid4().hex}
        item = self._validate(data)

        placeholders = ", ".join("?" for _ in COLUMNS)
        with self._get_connection() as conn:
            conn.execute(
                f"INSERT INTO knowledge_items ({', '.join(COLUMNS)}) VALUES ({placeholders})",
                self._item_to_row(item),
            )

        logger.info(f"Created knowledge item {item.id} ({item.type}) for user {item.user_id}")
        return item

    def find_by_id(self, item_id: str) -> KnowledgeItem | None:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM knowledge_items WHERE id = ?", (item_id,)
            ).fetchone()
        return self._row_to_item(row) if row else None

    def find_by_id_and_update(
        self, item_id: str, changes: dict[str, Any]
    ) -> KnowledgeItem | None:
        current = self.find_by_id(item_id)
        if current is None:
            return None

        data = current.model_dump()
        data.update({k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS})
        data["updated_at"] = utc_now()
        item = self._validate(data)

        assignments = ", ".join(f"{column} = ?" for column in COLUMNS[1:])
        with self._get_connection() as conn:
            conn.execute(
                f"UPDATE knowledge_items SET {assignments} WHERE id = ?",
                (*self._item_to_row(item)[1:], item_id),
            )

        logger.info(f"Updated knowledge item {item_id}")
        return item

    def find_by_id_and_delete(self, item_id: str) -> KnowledgeItem | None:
        current = self.find_by_id(item_id)
        if current is None:
            return None

        with self._get_connection() as conn:
            conn.execute("DELETE FROM knowledge_items WHERE id = ?", (item_id,))

        logger.info(f"Deleted knowledge item {item_id}")
        return current
