"""Custom SQLAlchemy types with cross-DB support (PostgreSQL in prod, SQLite in tests)."""

import json
import uuid
from typing import List, Optional

from sqlalchemy import String, Text, TypeDecorator


class GUID(TypeDecorator):
    """
    Platform-independent UUID type.

    - Uses PostgreSQL UUID type when available
    - Falls back to CHAR(36) storing the dashed string form elsewhere (e.g., SQLite)
    """

    impl = String(36)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            from sqlalchemy.dialects.postgresql import UUID as PG_UUID

            return dialect.type_descriptor(PG_UUID(as_uuid=True))
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        if dialect.name == "postgresql":
            return value
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(str(value))


class GUIDListType(TypeDecorator):
    """
    Store a list of UUIDs as a single column, like a document array field.

    - On PostgreSQL: uses ARRAY(UUID)
    - On SQLite (and others): stores JSON text in a TEXT column

    Always returns List[uuid.UUID]. Mutations are only detected on assignment,
    so callers must assign a new list rather than appending in place.
    """

    cache_ok = True
    impl = Text  # placeholder, real impl decided per-dialect

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            from sqlalchemy.dialects.postgresql import ARRAY
            from sqlalchemy.dialects.postgresql import UUID as PG_UUID

            return dialect.type_descriptor(ARRAY(PG_UUID(as_uuid=True)))
        return dialect.type_descriptor(Text())

    def process_bind_param(self, value: Optional[List[uuid.UUID]], dialect):
        if value is None:
            return None
        values = [v if isinstance(v, uuid.UUID) else uuid.UUID(str(v)) for v in value]
        if dialect.name == "postgresql":
            return values
        return json.dumps([str(v) for v in values])

    def process_result_value(self, value, dialect) -> Optional[List[uuid.UUID]]:
        if value is None:
            return None
        if isinstance(value, str):
            value = json.loads(value)
        return [v if isinstance(v, uuid.UUID) else uuid.UUID(str(v)) for v in value]
