"""
Database Base Module

Creates the SQLAlchemy database instance shared by the models and the
database-backed store. Kept separate to avoid circular imports.
"""

from flask_sqlalchemy import SQLAlchemy

# Initialized with the Flask app in app.py
db = SQLAlchemy()
