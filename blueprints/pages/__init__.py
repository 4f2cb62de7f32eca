"""
Pages Blueprint - Public pages
Handles: Index, contact form, PWA manifest and service worker
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
