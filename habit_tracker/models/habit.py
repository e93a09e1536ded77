"""
Habit Models

A Habit belongs to one user and carries an ordered list of HabitDate records,
one per date key, each holding a tri-state completion value.
"""

from datetime import datetime
from .database import db
from .utils import today_key

STATUS_NONE = 'none'
STATUS_YES = 'yes'
STATUS_NO = 'no'

# none -> yes -> no -> none
NEXT_STATUS = {
    STATUS_NONE: STATUS_YES,
    STATUS_YES: STATUS_NO,
    STATUS_NO: STATUS_NONE,
}


class Habit(db.Model):
    """A tracked habit owned by a user"""
    __tablename__ = 'habits'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'title', name='uq_habits_user_title'),
    )
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    dates = db.relationship('HabitDate', backref='habit', lazy=True,
                            cascade='all, delete-orphan', order_by='HabitDate.id')
    
    def __init__(self, title, user_id, description='', seed_date=None):
        """Create a habit seeded with an untouched record for `seed_date` (default today)"""
        from ..utils.validators import validate_title, validate_description
        
        title_validation = validate_title(title)
        if not title_validation.is_valid:
            raise ValueError(title_validation.error_message)
        
        description_validation = validate_description(description)
        if not description_validation.is_valid:
            raise ValueError(description_validation.error_message)
        
        self.title = title_validation.sanitized_value
        self.description = description_validation.sanitized_value
        self.user_id = user_id
        self.dates = [HabitDate(date=seed_date or today_key(), complete=STATUS_NONE)]
    
    def find_date(self, key):
        """Return the HabitDate whose key equals `key`, or None"""
        for record in self.dates:
            if record.date == key:
                return record
        return None
    
    def status_on(self, key):
        record = self.find_date(key)
        return record.complete if record else STATUS_NONE
    
    def toggle(self, key):
        """
        Advance the completion status for `key` and return the new value.
        
        An existing record cycles none -> yes -> no -> none. A key with no
        record gets a new one marked 'yes'.
        """
        record = self.find_date(key)
        if record is None:
            record = HabitDate(date=key, complete=STATUS_YES)
            self.dates.append(record)
        else:
            record.complete = NEXT_STATUS.get(record.complete, STATUS_YES)
        return record.complete
    
    def week_summary(self, keys):
        """Statuses for each key in `keys` plus how many of them are 'yes'"""
        days = [{'date': key, 'complete': self.status_on(key)} for key in keys]
        done = sum(1 for day in days if day['complete'] == STATUS_YES)
        return days, done
    
    def __repr__(self):
        return f'<Habit {self.title!r}>'


class HabitDate(db.Model):
    """Completion record for one habit on one date key"""
    __tablename__ = 'habit_dates'
    __table_args__ = (
        db.UniqueConstraint('habit_id', 'date', name='uq_habit_dates_habit_date'),
    )
    
    id = db.Column(db.Integer, primary_key=True)
    habit_id = db.Column(db.Integer, db.ForeignKey('habits.id'), nullable=False)
    date = db.Column(db.String(32), nullable=False)
    complete = db.Column(db.String(4), nullable=False, default=STATUS_NONE)
