"""
Utilities Package

Authentication helpers, input validators, and error handling.
"""

from . import auth_utils
from . import validators
from . import error_handlers

__all__ = [
    'auth_utils',
    'validators', 
    'error_handlers'
]
