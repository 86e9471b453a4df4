from flask import Blueprint

habits_bp = Blueprint('habits', __name__)
completions_bp = Blueprint('completions', __name__)
analytics_bp = Blueprint('analytics', __name__)
auth_bp = Blueprint('auth', __name__)

from . import habits, completions, analytics, auth
