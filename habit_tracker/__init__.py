"""
Habit Tracker Application Package

FLOW OVERVIEW
- create_app(test_config=None)
  • Build Flask app, apply config (test or env-based), init the database.
  • Register blueprints: main (/), users (/users), habits (/habits).
  • Register error handlers, template context, and the init-db CLI command.
"""

from flask import Flask
from .models import db
from .routes import main_bp, users_bp, habits_bp
from .config import Config

def create_app(test_config=None):
    """Application factory"""
    app = Flask(__name__)
    
    # Configuration
    if test_config:
        # Use test configuration if provided
        app.config.update(test_config)
    else:
        # Use environment-based configuration
        app.config.from_object(Config())
    
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    
    # Initialize extensions
    db.init_app(app)
    
    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(users_bp, url_prefix='/users')
    app.register_blueprint(habits_bp, url_prefix='/habits')
    
    # Register error handlers
    from .utils.error_handlers import register_error_handlers
    register_error_handlers(app)
    
    @app.context_processor
    def inject_current_user():
        from .utils.auth_utils import get_current_user
        return {'current_user': get_current_user()}
    
    @app.cli.command('init-db')
    def init_db():
        """Create all database tables."""
        db.create_all()
        app.logger.info("Database tables created")
    
    return app
