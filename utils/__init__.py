"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import localized, experience_item_required
from .language import resolve_language, get_request_language, DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from .translations import TRANSLATIONS, get_translation
from .content import (
    LoadSource,
    LoadResult,
    load_content,
    load_profile,
    load_experience,
    load_education,
    load_projects
)
from .skills import filter_skills
from .github import fetch_repo_stats
from .notifications import send_contact_email, load_smtp_config

__all__ = [
    # Decorators
    'localized',
    'experience_item_required',

    # Language
    'resolve_language',
    'get_request_language',
    'DEFAULT_LANGUAGE',
    'SUPPORTED_LANGUAGES',
    'TRANSLATIONS',
    'get_translation',

    # Content
    'LoadSource',
    'LoadResult',
    'load_content',
    'load_profile',
    'load_experience',
    'load_education',
    'load_projects',

    # Skills
    'filter_skills',

    # Outbound
    'fetch_repo_stats',
    'send_contact_email',
    'load_smtp_config'
]
