"""
CV Blueprint - Localized CV section fragments
Handles: Profile, experience, education, projects, skill filtering
"""

from flask import Blueprint

cv_bp = Blueprint('cv', __name__, url_prefix='/cv')

from . import routes
