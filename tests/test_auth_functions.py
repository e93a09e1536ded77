"""
Habit Tracker - Authentication Functions Unit Tests

Covers password hashing and verification, user creation, and authentication
in isolation from the routes.
"""

import pytest
from habit_tracker.models import User
from habit_tracker.utils.auth_utils import (
    hash_password, verify_password, create_user, authenticate_user, set_password
)


# Add timeout to all tests to prevent hanging
pytestmark = pytest.mark.timeout(30)


class TestPasswordFunctions:
    """Test password-related utility functions"""
    
    def test_hash_password(self, app_context):
        """Test that password hashing produces a bcrypt hash"""
        password = "TestPassword123!"
        hashed = hash_password(password)
        
        assert hashed != password
        assert hashed.startswith('$2')
        assert len(hashed) == 60
    
    def test_hash_password_uses_configured_rounds(self, app_context):
        hashed = hash_password("TestPassword123!")
        assert hashed.split('$')[2] == '04'
    
    def test_hash_password_is_salted(self, app_context):
        assert hash_password("same") != hash_password("same")
    
    def test_verify_password_correct(self, app_context):
        """Test password verification with correct password"""
        password = "TestPassword123!"
        hashed = hash_password(password)
        
        assert verify_password(password, hashed) is True
    
    def test_verify_password_incorrect(self, app_context):
        """Test password verification with incorrect password"""
        hashed = hash_password("TestPassword123!")
        
        assert verify_password("WrongPassword123!", hashed) is False
    
    def test_verify_password_empty_values(self, app_context):
        hashed = hash_password("TestPassword123!")
        
        assert verify_password("", hashed) is False
        assert verify_password("TestPassword123!", "") is False
    
    def test_verify_password_malformed_hash(self):
        assert verify_password("password123", "not-a-bcrypt-hash") is False


class TestUserFunctions:
    """Test user creation and authentication"""
    
    def test_create_user(self, db_session):
        user = create_user('New@Example.com', 'password123', 'New User')
        
        assert user.id is not None
        assert user.email == 'new@example.com'
        assert len(user.user_id) == 12
        assert verify_password('password123', user.password_hash)
    
    def test_create_user_requires_password(self, db_session):
        with pytest.raises(ValueError):
            create_user('new@example.com', '', 'New User')
    
    def test_create_user_invalid_email(self, db_session):
        with pytest.raises(ValueError, match='Invalid email format'):
            create_user('bad-email', 'password123', 'New User')
        assert User.query.count() == 0
    
    def test_authenticate_user(self, test_user):
        assert authenticate_user('test@example.com', 'password123') == test_user
    
    def test_authenticate_user_normalizes_email(self, test_user):
        assert authenticate_user('  TEST@example.com ', 'password123') == test_user
    
    def test_authenticate_user_wrong_password(self, test_user):
        assert authenticate_user('test@example.com', 'nope') is None
    
    def test_authenticate_unknown_user(self, db_session):
        assert authenticate_user('ghost@example.com', 'password123') is None
        assert authenticate_user('', 'password123') is None
    
    def test_set_password(self, test_user):
        set_password(test_user, 'changed')
        
        assert authenticate_user('test@example.com', 'changed') == test_user
        assert authenticate_user('test@example.com', 'password123') is None
    
    def test_user_rejects_plaintext_password(self, db_session):
        with pytest.raises(ValueError, match='bcrypt'):
            User(email='x@example.com', password_hash='password123', name='X')
