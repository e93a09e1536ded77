"""
User Routes

FLOW OVERVIEW
- /users/sign-up [GET], /users/sign-in [GET]
  • Render forms; signed-in users go straight to the dashboard.
- /users/create [POST]
  • Validate → reject mismatch/duplicate → create user → redirect to sign-in.
- /users/create-session [POST]
  • Authenticate → set session → redirect to dashboard.
- /users/sign-out [GET]
  • Clear session and redirect to sign-in.
- /users/reset-password [GET, POST]
  • Render form / look up by email → update password → redirect to sign-in.
- /users/toggle-view [GET]
  • Auth gate; flip dashboard between daily and weekly.
"""

import logging

from flask import Blueprint, flash, redirect, render_template, request, url_for
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..models import db, User
from ..utils.auth_utils import (
    authenticate_user, create_user, get_current_user, login_required,
    login_user, logout_user, set_password
)
from ..utils.error_handlers import redirect_back
from ..utils.validators import validate_email, validate_password

logger = logging.getLogger(__name__)

users_bp = Blueprint('users', __name__)

def _email_taken(email):
    return User.query.filter_by(email=email).first() is not None

@users_bp.route('/sign-up')
def sign_up():
    if get_current_user():
        return redirect(url_for('main.home'))
    return render_template('users/sign_up.html')

@users_bp.route('/sign-in')
def sign_in():
    if get_current_user():
        return redirect(url_for('main.home'))
    return render_template('users/sign_in.html')

@users_bp.route('/create', methods=['POST'])
def create():
    """Register a new user"""
    name = request.form.get('name', '')
    email = request.form.get('email', '').strip().lower()
    password = request.form.get('password', '')
    confirm_password = request.form.get('confirm_password', '')
    
    if password != confirm_password:
        flash('Passwords do not match.', 'error')
        return redirect_back('users.sign_up')
    
    password_validation = validate_password(password)
    if not password_validation.is_valid:
        flash(password_validation.error_message, 'error')
        return redirect_back('users.sign_up')
    
    email_validation = validate_email(email)
    if not email_validation.is_valid:
        flash(email_validation.error_message, 'error')
        return redirect_back('users.sign_up')
    
    if _email_taken(email_validation.sanitized_value):
        flash('A user with this email already exists.', 'error')
        return redirect_back('users.sign_up')
    
    try:
        create_user(email_validation.sanitized_value, password, name)
    except ValueError as e:
        db.session.rollback()
        flash(str(e), 'error')
        return redirect_back('users.sign_up')
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.session.rollback()
        flash('A user with this email already exists.', 'error')
        return redirect_back('users.sign_up')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to create user %s", email)
        flash('Registration failed. Please try again.', 'error')
        return redirect_back('users.sign_up')
    
    flash('Account created. You can now sign in.', 'success')
    return redirect(url_for('users.sign_in'))

@users_bp.route('/create-session', methods=['POST'])
def create_session():
    """Sign a user in"""
    email = request.form.get('email', '')
    password = request.form.get('password', '')
    
    user = authenticate_user(email, password)
    if user is None:
        flash('Invalid email or password.', 'error')
        return redirect(url_for('users.sign_in'))
    
    login_user(user)
    logger.info("User %s signed in", user.user_id)
    flash(f'Welcome back, {user.name}!', 'success')
    return redirect(url_for('main.home'))

@users_bp.route('/sign-out')
def destroy_session():
    """Sign the current user out"""
    logout_user()
    flash('You have been signed out.', 'info')
    return redirect(url_for('users.sign_in'))

@users_bp.route('/reset-password', methods=['GET', 'POST'])
def reset_password():
    """Set a new password for the account with the given email"""
    if request.method == 'GET':
        return render_template('users/reset_password.html')
    
    email = request.form.get('email', '').strip().lower()
    password = request.form.get('password', '')
    confirm_password = request.form.get('confirm_password', '')
    
    user = User.query.filter_by(email=email).first() if email else None
    if user is None:
        flash('No account found for that email. Please sign up.', 'error')
        return redirect(url_for('users.sign_up'))
    
    if password != confirm_password:
        flash('Passwords do not match.', 'error')
        return redirect_back('users.reset_password')
    
    password_validation = validate_password(password)
    if not password_validation.is_valid:
        flash(password_validation.error_message, 'error')
        return redirect_back('users.reset_password')
    
    try:
        set_password(user, password)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to reset password for user %s", user.user_id)
        flash('Password reset failed. Please try again.', 'error')
        return redirect_back('users.reset_password')
    
    flash('Password updated. You can now sign in.', 'success')
    return redirect(url_for('users.sign_in'))

@users_bp.route('/toggle-view')
@login_required
def toggle_view():
    """Switch between daily and weekly dashboards"""
    user = get_current_user()
    try:
        user.toggle_view()
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to change view for user %s", user.user_id)
        flash('Could not change the view. Please try again.', 'error')
    return redirect(url_for('main.home'))
