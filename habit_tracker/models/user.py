"""
User Model

A registered account. Owns habits; the public `user_id` is what the session stores.
"""

from datetime import datetime
from .database import db
from .utils import generate_user_id

VIEW_DAILY = 'daily'
VIEW_WEEKLY = 'weekly'


class User(db.Model):
    """User model for authentication and the habit dashboard"""
    __tablename__ = 'users'
    
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(12), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    view = db.Column(db.String(10), nullable=False, default=VIEW_DAILY)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    # Relationships
    habits = db.relationship('Habit', backref='user', lazy=True,
                             cascade='all, delete-orphan', order_by='Habit.created_at')
    
    def __init__(self, email, password_hash, name):
        """Initialize a new user, validating every field"""
        # Import validators here to avoid circular imports
        from ..utils.validators import validate_email, validate_password_hash, validate_name
        
        email_validation = validate_email(email)
        if not email_validation.is_valid:
            raise ValueError(email_validation.error_message)
        
        hash_validation = validate_password_hash(password_hash)
        if not hash_validation.is_valid:
            raise ValueError(hash_validation.error_message)
        
        name_validation = validate_name(name)
        if not name_validation.is_valid:
            raise ValueError(name_validation.error_message)
        
        self.email = email_validation.sanitized_value
        self.password_hash = hash_validation.sanitized_value
        self.name = name_validation.sanitized_value
        self.user_id = generate_user_id()
        self.view = VIEW_DAILY
    
    def toggle_view(self):
        """Switch the dashboard between the daily and weekly layouts"""
        self.view = VIEW_WEEKLY if self.view == VIEW_DAILY else VIEW_DAILY
        return self.view
    
    def __repr__(self):
        return f'<User {self.email}>'
