"""
Test configuration and shared fixtures for Habit Tracker tests.

This file contains:
- Centralized test configuration
- Shared fixtures used across multiple test files
"""

import pytest
from habit_tracker import create_app
from habit_tracker.models import db, User, Habit
from habit_tracker.utils.auth_utils import hash_password


# Centralized test configuration
TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'SECRET_KEY': 'test-secret-key',
    'BCRYPT_LOG_ROUNDS': 4,
    'WEEK_LENGTH': 7,
    'LOG_LEVEL': 'DEBUG'
}


@pytest.fixture
def app():
    """Create and configure a new app instance for each test."""
    app = create_app(TEST_CONFIG)
    return app


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def app_context(app):
    """Create an application context for database operations."""
    with app.app_context():
        yield


@pytest.fixture
def db_session(app_context):
    """Create a database session and clean up after tests."""
    db.create_all()
    yield db.session
    db.session.remove()
    db.drop_all()


@pytest.fixture
def test_user(db_session):
    """Create a test user for testing."""
    user = User(
        email='test@example.com',
        password_hash=hash_password('password123'),
        name='Test User'
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def other_user(db_session):
    """A second account, for ownership checks."""
    user = User(
        email='other@example.com',
        password_hash=hash_password('password123'),
        name='Other User'
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def logged_in_client(client, test_user):
    """Test client whose session is signed in as `test_user`."""
    with client.session_transaction() as sess:
        sess['user_id'] = test_user.user_id
    return client


@pytest.fixture
def test_habit(db_session, test_user):
    """A habit owned by `test_user` with one untouched date record."""
    habit = Habit(
        title='Test Habit',
        description='Test Description',
        user_id=test_user.id,
        seed_date='4 4'
    )
    db_session.add(habit)
    db_session.commit()
    return habit
