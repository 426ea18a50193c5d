"""
Models Package

Exports the database models and the db instance for use throughout the application.
"""

from .base import db

from .store import StoredValue

__all__ = [
    'db',
    'StoredValue',
]
