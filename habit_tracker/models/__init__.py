"""
Database Models Package

FLOW OVERVIEW
- Centralizes SQLAlchemy DB instance and model imports for convenient usage.
- Exposes: db, User, Habit, HabitDate.
"""

from .database import db
from .user import User
from .habit import Habit, HabitDate

__all__ = [
    'db',
    'User',
    'Habit',
    'HabitDate'
]
