"""
Routes Package

This package contains all Flask route blueprints.
"""

from .main import main_bp
from .users import users_bp
from .habits import habits_bp

__all__ = [
    'main_bp',
    'users_bp',
    'habits_bp'
]
