#!/usr/bin/env python3
"""
Habit Tracker application entry point.

This module selects configuration based on environment variables, creates the
Flask application via `create_app`, and makes sure the database tables exist.
When executed directly, it runs the development server. In production, a WSGI
server should import `app` from this module.

Environment variables of interest:
- FLASK_ENV: if set to 'testing', uses an in-memory DB and testing flags.
- DATABASE_URL: database connection string.
- SECRET_KEY, LOG_LEVEL, BCRYPT_LOG_ROUNDS: consumed by `create_app`.
"""

import logging
import os
from habit_tracker import create_app
from habit_tracker.models import db

logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
)
logger = logging.getLogger('habit_tracker')

# Create app instance
if os.getenv('FLASK_ENV') == 'testing':
    test_config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': os.getenv('DATABASE_URL', 'sqlite:///:memory:'),
        'SECRET_KEY': os.getenv('SECRET_KEY', 'test-secret-key'),
        'BCRYPT_LOG_ROUNDS': 4,
        'LOG_LEVEL': 'DEBUG'
    }
    app = create_app(test_config)
else:
    app = create_app()

with app.app_context():
    db.create_all()
    logger.info("Database tables ready")

if __name__ == '__main__':
    app.run(debug=os.getenv('FLASK_ENV') != 'production', host='0.0.0.0', port=int(os.getenv('PORT', 5000)))
