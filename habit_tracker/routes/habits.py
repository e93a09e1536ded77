"""
Habit Routes

FLOW OVERVIEW
- /habits/create [POST]
  • Validate → reject duplicate title for this user → create seeded with today.
- /habits/toggle-status [GET] ?id=&date=
  • Cycle the habit's status for the date key (none → yes → no → none).
- /habits/delete [GET] ?id=
  • Delete the habit and its date records.
- /habits/edit [GET, POST] ?id=
  • Render form / persist new title and description.

Every route requires login and only touches the signed-in user's habits.
Outcomes are reported with flash messages followed by a redirect back.
"""

import logging

from flask import Blueprint, flash, redirect, render_template, request, url_for
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..models import db, Habit
from ..models.utils import today_key
from ..utils.auth_utils import get_current_user, login_required
from ..utils.error_handlers import redirect_back
from ..utils.validators import validate_description, validate_title

logger = logging.getLogger(__name__)

habits_bp = Blueprint('habits', __name__)

def _find_user_habit(user):
    """Look up the habit named by ?id= among the user's habits"""
    habit_id = request.args.get('id', type=int)
    if habit_id is None:
        return None
    return Habit.query.filter_by(id=habit_id, user_id=user.id).first()

def _title_taken(user, title, exclude_id=None):
    query = Habit.query.filter_by(user_id=user.id, title=title)
    if exclude_id is not None:
        query = query.filter(Habit.id != exclude_id)
    return query.first() is not None

@habits_bp.route('/create', methods=['POST'])
@login_required
def create_habit():
    """Create a habit for the signed-in user"""
    user = get_current_user()
    title_validation = validate_title(request.form.get('title', ''))
    if not title_validation.is_valid:
        flash(title_validation.error_message, 'error')
        return redirect_back()
    title = title_validation.sanitized_value
    
    description_validation = validate_description(request.form.get('desc', ''))
    if not description_validation.is_valid:
        flash(description_validation.error_message, 'error')
        return redirect_back()
    
    if _title_taken(user, title):
        flash('Habit already exists.', 'error')
        return redirect_back()
    
    try:
        habit = Habit(title=title, user_id=user.id, description=description_validation.sanitized_value)
        db.session.add(habit)
        db.session.commit()
    except IntegrityError:
        # Concurrent create with the same title
        db.session.rollback()
        flash('Habit already exists.', 'error')
        return redirect_back()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to create habit for user %s", user.user_id)
        flash('Could not create habit. Please try again.', 'error')
        return redirect_back()
    
    logger.info("User %s created habit %s", user.user_id, habit.id)
    flash('Habit created.', 'success')
    return redirect_back()

@habits_bp.route('/toggle-status')
@login_required
def toggle_status():
    """Advance the completion status of a habit on one date"""
    user = get_current_user()
    habit = _find_user_habit(user)
    if habit is None:
        flash('Habit not found.', 'error')
        return redirect_back()
    
    key = request.args.get('date', '').strip() or today_key()
    try:
        status = habit.toggle(key)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to toggle habit %s on %s", habit.id, key)
        flash('Could not update habit. Please try again.', 'error')
        return redirect_back()
    
    logger.debug("Habit %s on %s is now %s", habit.id, key, status)
    return redirect_back()

@habits_bp.route('/delete')
@login_required
def delete_habit():
    """Delete one of the signed-in user's habits"""
    user = get_current_user()
    habit = _find_user_habit(user)
    if habit is None:
        flash('Habit not found.', 'error')
        return redirect_back()
    
    habit_id = habit.id
    try:
        db.session.delete(habit)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to delete habit %s", habit_id)
        flash('Could not delete habit. Please try again.', 'error')
        return redirect_back()
    
    logger.info("User %s deleted habit %s", user.user_id, habit_id)
    flash('Habit deleted.', 'success')
    return redirect_back()

@habits_bp.route('/edit', methods=['GET', 'POST'])
@login_required
def edit_habit():
    """Edit the title and description of a habit"""
    user = get_current_user()
    habit = _find_user_habit(user)
    if habit is None:
        flash('Habit not found.', 'error')
        return redirect_back()
    
    if request.method == 'GET':
        return render_template('habits/edit.html', habit=habit)
    
    title_validation = validate_title(request.form.get('title', ''))
    if not title_validation.is_valid:
        flash(title_validation.error_message, 'error')
        return redirect_back()
    title = title_validation.sanitized_value
    
    description_validation = validate_description(request.form.get('desc', ''))
    if not description_validation.is_valid:
        flash(description_validation.error_message, 'error')
        return redirect_back()
    
    if _title_taken(user, title, exclude_id=habit.id):
        flash('Another habit already has that title.', 'error')
        return redirect_back()
    
    try:
        habit.title = title
        habit.description = description_validation.sanitized_value
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        flash('Another habit already has that title.', 'error')
        return redirect_back()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to edit habit %s", habit.id)
        flash('Could not update habit. Please try again.', 'error')
        return redirect_back()
    
    logger.info("User %s edited habit %s", user.user_id, habit.id)
    flash('Habit updated.', 'success')
    return redirect(url_for('main.home'))
