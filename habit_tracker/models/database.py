"""
Database Configuration

FLOW OVERVIEW
- Provides the global SQLAlchemy instance `db` shared by the User and Habit models.
- Bound to the app in the factory (habit_tracker/__init__.py); the connection
  string comes from DATABASE_URL.
"""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
