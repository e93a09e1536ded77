"""
Model Utilities

Identifier and date-key helpers shared by the models and routes.
"""

import secrets
import string
from datetime import date, timedelta

DATE_KEY_FORMAT = '%Y-%m-%d'

def generate_user_id():
    """Generate a unique 12-character public user ID"""
    return ''.join(secrets.choice(string.ascii_uppercase + string.digits) for _ in range(12))

def date_key(day=None):
    """Return the string key used to store completion records for `day` (default today)"""
    if day is None:
        day = date.today()
    return day.strftime(DATE_KEY_FORMAT)

def today_key():
    return date_key(date.today())

def last_n_date_keys(n, end=None):
    """Keys for the `n` days ending at `end` (inclusive), oldest first"""
    if end is None:
        end = date.today()
    return [date_key(end - timedelta(days=offset)) for offset in range(n - 1, -1, -1)]
