"""
Storage Service

Key-value stores holding JSON values. Both implementations share one
contract: get(key) returns the stored value or None, set(key, value)
returns True on success. Failures are logged and swallowed; callers treat
them as "the operation had no effect".
"""

import json
import logging

from sqlalchemy.exc import SQLAlchemyError

from models import db, StoredValue

logger = logging.getLogger(__name__)


class MemoryStore:
    """In-process store. Values are kept as JSON text like the database store."""

    def __init__(self, initial=None):
        self._data = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key):
        raw = self._data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key, value):
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.warning("Value for %s is not JSON-serializable: %s", key, e)
            return False
        return True


class DatabaseStore:
    """Store backed by the StoredValue table. Needs an application context."""

    def __init__(self, database=None):
        self.db = database if database is not None else db

    def get(self, key):
        try:
            row = StoredValue.query.filter_by(key=key).first()
        except SQLAlchemyError as e:
            logger.warning("Error reading %s: %s", key, e)
            return None

        if row is None:
            return None

        try:
            return json.loads(row.value)
        except (TypeError, ValueError) as e:
            logger.warning("Stored value for %s is not valid JSON: %s", key, e)
            return None

    def set(self, key, value):
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.warning("Value for %s is not JSON-serializable: %s", key, e)
            return False

        try:
            row = StoredValue.query.filter_by(key=key).first()
            if row:
                row.value = payload
            else:
                self.db.session.add(StoredValue(key=key, value=payload))
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.warning("Error saving %s: %s", key, e)
            return False
        return True
