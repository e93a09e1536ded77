"""
Authentication Utilities

Password hashing, account creation, and the session-backed login state used by
every blueprint. The session stores the user's public `user_id`; the signed
Flask session cookie carries it between requests.
"""

import logging
from functools import wraps

import bcrypt
from flask import current_app, flash, g, has_app_context, redirect, session, url_for

from ..models import db, User

logger = logging.getLogger(__name__)

SESSION_USER_KEY = 'user_id'


def hash_password(password):
    """Hash a password using bcrypt"""
    rounds = 12
    if has_app_context():
        rounds = current_app.config.get('BCRYPT_LOG_ROUNDS', rounds)
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(password, password_hash):
    """Verify a password against its hash"""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Malformed stored hash
        return False


def create_user(email, password, name):
    """Create and commit a new user. Raises ValueError on invalid fields."""
    if not password:
        raise ValueError("Password is required")
    user = User(email=email, password_hash=hash_password(password), name=name)
    db.session.add(user)
    db.session.commit()
    logger.info("Created user %s", user.user_id)
    return user


def authenticate_user(email, password):
    """Return the user matching email and password, or None"""
    if not email:
        return None
    user = User.query.filter_by(email=email.strip().lower()).first()
    if user and verify_password(password, user.password_hash):
        return user
    return None


def set_password(user, password):
    """Replace a user's password hash and commit"""
    user.password_hash = hash_password(password)
    db.session.commit()
    logger.info("Password reset for user %s", user.user_id)


def login_user(user):
    session.clear()
    session[SESSION_USER_KEY] = user.user_id
    session.permanent = True


def logout_user():
    session.clear()
    g.pop('current_user', None)


def get_current_user():
    """Resolve the signed-in user from the session, cached on `g` for the request"""
    public_id = session.get(SESSION_USER_KEY)
    if not public_id:
        return None
    cached = g.get('current_user')
    if cached is not None and cached.user_id == public_id:
        return cached
    user = User.query.filter_by(user_id=public_id).first()
    if user is None:
        # Stale session for a user that no longer exists
        session.pop(SESSION_USER_KEY, None)
    g.current_user = user
    return user


def login_required(f):
    """Decorator to require a signed-in user; others are sent to the sign-in page"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if get_current_user() is None:
            flash('Please sign in to continue.', 'error')
            return redirect(url_for('users.sign_in'))
        return f(*args, **kwargs)
    return decorated_function
