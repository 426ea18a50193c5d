"""
Stored Value Model

Contains the StoredValue model backing the key-value store.
"""

from .base import db


class StoredValue(db.Model):
    """Key-value storage; value holds JSON text."""
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(100), unique=True, nullable=False, index=True)
    value = db.Column(db.Text, nullable=False, default='null')
    updated_at = db.Column(db.DateTime, default=db.func.now(), onupdate=db.func.now())
