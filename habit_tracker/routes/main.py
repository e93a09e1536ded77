"""
Main Routes

FLOW OVERVIEW
- / [GET]
  • Auth gate; dashboard of the user's habits in daily or weekly view.
- /health [GET]
  • JSON health check.
"""

from datetime import datetime

from flask import Blueprint, current_app, jsonify, render_template

from ..models.user import VIEW_WEEKLY
from ..models.utils import last_n_date_keys, today_key
from ..utils.auth_utils import get_current_user, login_required

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
@login_required
def home():
    """Dashboard route"""
    user = get_current_user()
    today = today_key()
    week_keys = last_n_date_keys(current_app.config.get('WEEK_LENGTH', 7))
    
    habits = []
    for habit in user.habits:
        days, done = habit.week_summary(week_keys)
        habits.append({
            'id': habit.id,
            'title': habit.title,
            'description': habit.description,
            'today': habit.status_on(today),
            'days': days,
            'done': done,
        })
    
    return render_template('index.html',
                           habits=habits,
                           today=today,
                           week_keys=week_keys,
                           weekly=user.view == VIEW_WEEKLY)

@main_bp.route('/health')
def health():
    """Health check endpoint"""
    return jsonify({'status': 'healthy', 'timestamp': datetime.utcnow().isoformat()})
