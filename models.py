import uuid
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from flask_login import UserMixin

db = SQLAlchemy()

FREQUENCIES = ('daily', 'weekly', 'weekdays', 'weekends')


def _utcnow():
    return datetime.now(timezone.utc)


def _new_id():
    return str(uuid.uuid4())


def _isoformat(value):
    if value is None:
        return None
    # SQLite hands back naive values; every stored timestamp is UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class User(UserMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    password_hash = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), nullable=True)
    first_name = db.Column(db.String(100), nullable=True)
    last_name = db.Column(db.String(100), nullable=True)
    profile_image_url = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, default=_utcnow)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    habits = db.relationship('Habit', backref='owner', lazy=True, cascade="all, delete-orphan")

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'profileImageUrl': self.profile_image_url,
            'createdAt': _isoformat(self.created_at),
        }


class Habit(db.Model):
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text, nullable=False)
    frequency = db.Column(db.String(20), nullable=False, default='daily') # daily, weekly, weekdays, weekends
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)

    completions = db.relationship('HabitCompletion', backref='habit', lazy=True, cascade="all, delete-orphan")

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'name': self.name,
            'category': self.category,
            'frequency': self.frequency,
            'createdAt': _isoformat(self.created_at),
        }


class HabitCompletion(db.Model):
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    habit_id = db.Column(db.String(36), db.ForeignKey('habit.id', ondelete='CASCADE'), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False) # The calendar day it counts for
    completed = db.Column(db.Boolean, nullable=False, default=False)
    completed_at = db.Column(db.DateTime, nullable=True) # Only set while completed

    __table_args__ = (db.UniqueConstraint('habit_id', 'date', name='_habit_date_uc'),)

    def to_dict(self):
        return {
            'id': self.id,
            'habitId': self.habit_id,
            'date': self.date.isoformat(),
            'completed': self.completed,
            'completedAt': _isoformat(self.completed_at),
        }
