"""Habit persistence backends.

Every habit and completion query is scoped to an owner. ``Storage`` documents
the contract; ``MemoryStorage`` and ``DatabaseStorage`` implement it.
"""

from flask import current_app

from .base import Storage
from .database import DatabaseStorage
from .memory import MemoryStorage

BACKENDS = {
    'database': DatabaseStorage,
    'memory': MemoryStorage,
}


def build_storage(app):
    name = app.config.get('STORAGE_BACKEND', 'database')
    try:
        backend = BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown storage backend: {name!r}")
    return backend()


def get_storage():
    return current_app.extensions['habit_storage']


__all__ = ['Storage', 'DatabaseStorage', 'MemoryStorage', 'build_storage', 'get_storage']
